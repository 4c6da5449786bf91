"""Request data collectors for a web debugging toolbar."""

from requestbar.adapters.logging import MessagesHandler
from requestbar.collectors import DataCollector, MessagesCollector, TimeDataCollector
from requestbar.core.describe import Description, ValueKind, describe
from requestbar.core.exceptions import DebugBarError, MeasurementError
from requestbar.core.formatting import format_duration
from requestbar.core.models import LogEntry, Measure, OpenSpan
from requestbar.core.ports import DataCollectorPort, RenderablePort

__all__ = [
    "DataCollector",
    "DataCollectorPort",
    "DebugBarError",
    "Description",
    "LogEntry",
    "Measure",
    "MeasurementError",
    "MessagesCollector",
    "MessagesHandler",
    "OpenSpan",
    "RenderablePort",
    "TimeDataCollector",
    "ValueKind",
    "describe",
    "format_duration",
]
