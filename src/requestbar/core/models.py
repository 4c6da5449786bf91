"""Core domain models for collected request data."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LogEntry:
    """A message captured by the messages collector.

    Attributes:
        message: Display text of the logged value.
        is_string: Whether the logged value was already a string.
        label: Severity or category tag (e.g., info, error).
        time: Unix timestamp in seconds at capture.
        memory_usage: Process memory usage in bytes at capture.
    """

    message: str
    is_string: bool
    label: str
    time: float
    memory_usage: int

    def to_dict(self) -> dict[str, Any]:
        """Return the entry as a plain serializable dict."""
        return {
            "message": self.message,
            "is_string": self.is_string,
            "label": self.label,
            "time": self.time,
            "memory_usage": self.memory_usage,
        }


@dataclass(frozen=True)
class OpenSpan:
    """A measure that has been started but not stopped yet.

    Attributes:
        label: Public label given at start, if any.
        start: Unix timestamp in seconds when the span was opened.
    """

    label: str | None
    start: float


@dataclass(frozen=True)
class Measure:
    """A closed, timed span.

    Attributes:
        label: Public label of the span.
        start: Unix timestamp in seconds when the span started.
        end: Unix timestamp in seconds when the span ended.
        relative_start: Offset of start from the request start.
        relative_end: Offset of end from the request end. None until the
            request end time is known.
        duration: end - start, in seconds.
        duration_str: Human-readable duration.
    """

    label: str
    start: float
    end: float
    relative_start: float
    relative_end: float | None
    duration: float
    duration_str: str

    def to_dict(self) -> dict[str, Any]:
        """Return the measure as a plain serializable dict."""
        return {
            "label": self.label,
            "start": self.start,
            "relative_start": self.relative_start,
            "end": self.end,
            "relative_end": self.relative_end,
            "duration": self.duration,
            "duration_str": self.duration_str,
        }
