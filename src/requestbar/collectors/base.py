"""Common base shared by request data collectors."""

import abc
from typing import Any

from requestbar.core.formatting import format_duration


class DataCollector(abc.ABC):
    """Abstract collector summarizing one request's data.

    Subclasses accumulate observations during a request and return them
    as plain serializable data from ``collect()``.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Key under which the collected data is published."""

    @abc.abstractmethod
    def collect(self) -> dict[str, Any]:
        """Summarize the accumulated state."""

    @staticmethod
    def format_duration(seconds: float) -> str:
        """Format a duration in seconds for display."""
        return format_duration(seconds)
