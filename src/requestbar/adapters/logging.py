"""Python logging handler adapter for requestbar.

This adapter bridges Python's standard library logging module to a
MessagesCollector, so records logged during a request show up in the
messages panel.
"""

import logging
import traceback

from requestbar.collectors.messages import MessagesCollector


class MessagesHandler(logging.Handler):
    """Logging handler that adds log records to a MessagesCollector.

    Example:
        ```python
        from requestbar import MessagesCollector, MessagesHandler

        messages = MessagesCollector()
        handler = MessagesHandler(messages)
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        collector: MessagesCollector,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a messages collector.

        Args:
            collector: Collector receiving the records.
            level: Minimum level of records to forward.
        """
        super().__init__(level)
        self._collector = collector

    def emit(self, record: logging.LogRecord) -> None:
        """Add a log record to the collector as a string message.

        Args:
            record: The log record to emit.
        """
        message = record.getMessage()

        # Append the traceback of logged exceptions
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                message = "\n".join(
                    [
                        message,
                        "".join(
                            traceback.format_exception(exc_type, exc_value, exc_tb)
                        ).rstrip(),
                    ]
                )

        self._collector.add_message(message, record.levelname.lower())
