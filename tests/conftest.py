"""Shared test fixtures for all test modules."""

import time
from dataclasses import dataclass

import pytest

from requestbar.collectors.messages import MessagesCollector
from requestbar.collectors.timing import TimeDataCollector


@dataclass
class FakeClock:
    """Controllable replacement for time.time()."""

    now: float

    def __call__(self) -> float:
        return self.now

    def set(self, now: float) -> None:
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    """Freeze time.time() at 100.0 and let tests move it explicitly."""
    fake = FakeClock(100.0)
    monkeypatch.setattr(time, "time", fake)
    return fake


@pytest.fixture
def messages() -> MessagesCollector:
    """Provide an empty messages collector."""
    return MessagesCollector()


@pytest.fixture
def timer(clock: FakeClock) -> TimeDataCollector:
    """Provide a timer whose request started at the frozen clock time."""
    return TimeDataCollector()
