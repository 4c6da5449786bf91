"""Collector for request duration and timed operations."""

import dataclasses
import logging
import time
import uuid
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import Any, TypeVar

from requestbar.collectors.base import DataCollector
from requestbar.core.exceptions import MeasurementError
from requestbar.core.models import Measure, OpenSpan
from requestbar.core.ports import WidgetDefinitions

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Names generated by measure() carry this prefix
_GENERATED_PREFIX = "__measure:"


class TimeDataCollector(DataCollector):
    """Collects the request duration and the duration of named operations.

    Operations are timed either with explicit ``start_measure`` /
    ``stop_measure`` calls, the ``span`` context manager, or ``measure``
    wrapping a callable. ``collect()`` finalizes the request: it stamps
    the request end time and closes every span still open.

    Example:
        ```python
        timer = TimeDataCollector(request_start_time=scope_start)
        timer.start_measure("db", "Database query")
        rows = run_query()
        timer.stop_measure("db")
        html = timer.measure("Render", render, rows)
        payload = timer.collect()
        ```
    """

    def __init__(self, request_start_time: float | None = None) -> None:
        """Initialize the collector.

        Args:
            request_start_time: Unix timestamp in seconds at which the
                request started. Defaults to the current time.
        """
        if request_start_time is None:
            request_start_time = time.time()
        self._request_start_time = request_start_time
        self._request_end_time: float | None = None
        self._started_measures: dict[str, OpenSpan] = {}
        self._measures: dict[str, Measure] = {}

    @property
    def name(self) -> str:
        return "time"

    def start_measure(self, name: str, label: str | None = None) -> None:
        """Start a measure.

        Starting a name that is already open restarts it.

        Args:
            name: Internal name, used to stop the measure.
            label: Public name. Defaults to ``name``.
        """
        self._started_measures[name] = OpenSpan(label=label, start=time.time())
        logger.debug("Started measure %s", name)

    def has_started_measure(self, name: str) -> bool:
        """Return True if ``name`` has an open span."""
        return name in self._started_measures

    def stop_measure(self, name: str) -> None:
        """Stop a measure.

        Args:
            name: Name given to ``start_measure``.

        Raises:
            MeasurementError: If ``name`` has no open span.
        """
        end = time.time()
        if name not in self._started_measures:
            raise MeasurementError(name)
        span = self._started_measures.pop(name)
        self.add_measure(name, span.start, end, span.label)
        logger.debug("Stopped measure %s", name)

    def add_measure(
        self, name: str, start: float, end: float, label: str | None = None
    ) -> None:
        """Record a measure from known timestamps.

        An existing measure with the same name is replaced.

        Args:
            name: Internal name of the measure.
            start: Unix timestamp in seconds when the operation started.
            end: Unix timestamp in seconds when the operation ended.
            label: Public name. Defaults to ``name``.
        """
        duration = end - start
        self._measures[name] = Measure(
            label=label or name,
            start=start,
            end=end,
            relative_start=start - self._request_start_time,
            relative_end=self._relative_end(end),
            duration=duration,
            duration_str=self.format_duration(duration),
        )

    @contextmanager
    def span(self, name: str, label: str | None = None) -> Generator[None]:
        """Time the enclosed block as a measure.

        The span is closed on every exit path, including exceptions.

        Args:
            name: Internal name of the measure.
            label: Public name. Defaults to ``name``.
        """
        self.start_measure(name, label)
        try:
            yield
        finally:
            if self.has_started_measure(name):
                self.stop_measure(name)

    def measure(
        self, label: str, operation: Callable[..., T], *args: Any, **kwargs: Any
    ) -> T:
        """Time the execution of a callable.

        Args:
            label: Public name of the measure.
            operation: Callable to run synchronously.
            *args: Positional arguments for ``operation``.
            **kwargs: Keyword arguments for ``operation``.

        Returns:
            Whatever ``operation`` returns. Exceptions it raises propagate
            after the measure has been recorded.
        """
        with self.span(f"{_GENERATED_PREFIX}{uuid.uuid4().hex}", label):
            return operation(*args, **kwargs)

    def get_measures(self) -> dict[str, Measure]:
        """Return recorded measures by name, in insertion order."""
        return dict(self._measures)

    def get_request_start_time(self) -> float:
        return self._request_start_time

    def get_request_end_time(self) -> float | None:
        """Return the request end time, or None before ``collect()``."""
        return self._request_end_time

    def get_request_duration(self) -> float:
        """Return the request duration in seconds.

        Before ``collect()`` this is the time elapsed so far.
        """
        if self._request_end_time is not None:
            return self._request_end_time - self._request_start_time
        return time.time() - self._request_start_time

    def collect(self) -> dict[str, Any]:
        """Finalize the request timing and summarize it.

        Each call stamps a new request end time, so relative end offsets
        are recomputed against the latest call.
        """
        self._request_end_time = end = time.time()
        if self._started_measures:
            logger.warning(
                "Closing %d measure(s) still open at end of request: %s",
                len(self._started_measures),
                ", ".join(self._started_measures),
            )
        for name in list(self._started_measures):
            span = self._started_measures.pop(name)
            self.add_measure(name, span.start, end, span.label)

        for name, measure in list(self._measures.items()):
            self._measures[name] = dataclasses.replace(
                measure, relative_end=self._relative_end(measure.end)
            )

        duration = self.get_request_duration()
        logger.debug(
            "Collected %d measure(s) over %.6fs", len(self._measures), duration
        )
        return {
            "start": self._request_start_time,
            "end": end,
            "duration": duration,
            "duration_str": self.format_duration(duration),
            "measures": [measure.to_dict() for measure in self._measures.values()],
        }

    def get_widget_definitions(self) -> WidgetDefinitions:
        return {
            "time": {
                "icon": "time",
                "tooltip": "Request Duration",
                "map": "time.duration_str",
                "default": "'0ms'",
            },
            "timeline": {
                "widget": "PhpDebugBar.Widgets.TimelineWidget",
                "map": "time",
                "default": "{}",
            },
        }

    def _relative_end(self, end: float) -> float | None:
        if self._request_end_time is None:
            return None
        return end - self._request_end_time
