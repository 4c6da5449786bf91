"""Collector for application messages logged during a request."""

import re
import time
from typing import Any

import psutil

from requestbar.collectors.base import DataCollector
from requestbar.core.describe import describe
from requestbar.core.models import LogEntry
from requestbar.core.ports import WidgetDefinitions

_PLACEHOLDER = re.compile(r"\{([A-Za-z0-9_.]+)\}")


def _interpolate(message: str, context: dict[str, Any]) -> str:
    """Replace {key} placeholders with values from context.

    Placeholders without a matching key are left untouched.
    """

    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in context:
            return describe(context[key]).text
        return match.group(0)

    return _PLACEHOLDER.sub(replace, message)


class MessagesCollector(DataCollector):
    """Accumulates messages of any type with a label, time and memory usage.

    Example:
        ```python
        messages = MessagesCollector()
        messages.info("user {user} logged in", user="alice")
        messages.add_message({"cart": [1, 2]}, "debug")
        payload = messages.collect()
        ```
    """

    def __init__(self, name: str = "messages") -> None:
        """Initialize an empty collector.

        Args:
            name: Key under which messages are published (default "messages").
        """
        self._name = name
        self._messages: list[LogEntry] = []
        self._process = psutil.Process()

    @property
    def name(self) -> str:
        return self._name

    def log(self, level: str, message: object, **context: Any) -> None:
        """Log a message with an arbitrary level.

        Args:
            level: Level used as the message label. Not validated.
            message: Any value. Strings may contain {key} placeholders.
            **context: Values substituted into the placeholders.
        """
        if context and isinstance(message, str):
            message = _interpolate(message, context)
        self.add_message(message, level)

    def emergency(self, message: object, **context: Any) -> None:
        self.log("emergency", message, **context)

    def alert(self, message: object, **context: Any) -> None:
        self.log("alert", message, **context)

    def critical(self, message: object, **context: Any) -> None:
        self.log("critical", message, **context)

    def error(self, message: object, **context: Any) -> None:
        self.log("error", message, **context)

    def warning(self, message: object, **context: Any) -> None:
        self.log("warning", message, **context)

    def notice(self, message: object, **context: Any) -> None:
        self.log("notice", message, **context)

    def info(self, message: object, **context: Any) -> None:
        self.log("info", message, **context)

    def debug(self, message: object, **context: Any) -> None:
        self.log("debug", message, **context)

    def add_message(self, message: object, label: str = "info") -> None:
        """Add a message.

        A message can be anything from an object to a string.

        Args:
            message: The value to log.
            label: Severity or category tag (default "info").
        """
        description = describe(message)
        self._messages.append(
            LogEntry(
                message=description.text,
                is_string=description.is_text,
                label=label,
                time=time.time(),
                memory_usage=self._process.memory_info().rss,
            )
        )

    def get_messages(self) -> tuple[LogEntry, ...]:
        """Return all messages in insertion order."""
        return tuple(self._messages)

    def clear(self) -> None:
        """Drop all accumulated messages."""
        self._messages.clear()

    def collect(self) -> dict[str, Any]:
        return {
            "count": len(self._messages),
            "messages": [entry.to_dict() for entry in self._messages],
        }

    def get_widget_definitions(self) -> WidgetDefinitions:
        name = self._name
        return {
            name: {
                "widget": "PhpDebugBar.Widgets.MessagesWidget",
                "map": f"{name}.messages",
                "default": "[]",
            },
            f"{name}:badge": {
                "map": f"{name}.count",
                "default": "null",
            },
        }
