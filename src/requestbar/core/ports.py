"""Port interfaces for request data collectors.

These protocols define the contracts a toolbar orchestrator relies on.
Collectors depend only on these interfaces, not on any concrete renderer.
"""

from typing import Any, Protocol, runtime_checkable

WidgetDefinitions = dict[str, dict[str, str]]


@runtime_checkable
class DataCollectorPort(Protocol):
    """Port for collectors that summarize one request.

    Examples: MessagesCollector, TimeDataCollector.
    """

    @property
    def name(self) -> str:
        """Key under which the collected data is published."""
        ...

    def collect(self) -> dict[str, Any]:
        """Summarize the accumulated state as plain serializable data."""
        ...


@runtime_checkable
class RenderablePort(Protocol):
    """Port for collectors that declare display widgets."""

    def get_widget_definitions(self) -> WidgetDefinitions:
        """Return widget name to {widget, map, default, ...} definitions.

        Returns:
            Mapping consumed verbatim by the rendering layer.
        """
        ...
