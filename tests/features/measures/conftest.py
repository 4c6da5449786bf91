"""BDD step definitions for request timeline measures."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from requestbar.collectors.timing import TimeDataCollector
from requestbar.core.exceptions import MeasurementError


@dataclass
class TimelineScenarioContext:
    """Shared state between steps in a timeline scenario."""

    timer: TimeDataCollector | None = None
    collected: dict[str, Any] = field(default_factory=dict)
    error: Exception | None = None


@pytest.fixture
def ctx() -> TimelineScenarioContext:
    """Fresh scenario context for each test."""
    return TimelineScenarioContext()


# === Background Steps ===
@given(parsers.parse("a request that started at {start:f}"))
def step_request_started(ctx: TimelineScenarioContext, clock, start: float) -> None:
    clock.set(start)
    ctx.timer = TimeDataCollector(request_start_time=start)


# === Action Steps ===
@when(parsers.parse('measure "{name}" labelled "{label}" is started at {at:f}'))
def step_start_measure(
    ctx: TimelineScenarioContext, clock, name: str, label: str, at: float
) -> None:
    clock.set(at)
    ctx.timer.start_measure(name, label)


@when(parsers.parse('measure "{name}" is stopped at {at:f}'))
def step_stop_measure(
    ctx: TimelineScenarioContext, clock, name: str, at: float
) -> None:
    clock.set(at)
    try:
        ctx.timer.stop_measure(name)
    except MeasurementError as e:
        ctx.error = e


@when(parsers.parse("the request is collected at {at:f}"))
def step_collect(ctx: TimelineScenarioContext, clock, at: float) -> None:
    clock.set(at)
    ctx.collected = ctx.timer.collect()


@when(parsers.parse('an operation labelled "{label}" fails after {seconds:f} seconds'))
def step_failing_operation(
    ctx: TimelineScenarioContext, clock, label: str, seconds: float
) -> None:
    def operation() -> None:
        clock.advance(seconds)
        raise RuntimeError("operation failed")

    try:
        ctx.timer.measure(label, operation)
    except RuntimeError as e:
        ctx.error = e


# === Assertion Steps ===
@then(parsers.parse('measure "{name}" has label "{label}" and duration {duration:f}'))
def step_measure_has(
    ctx: TimelineScenarioContext, name: str, label: str, duration: float
) -> None:
    measure = ctx.timer.get_measures()[name]
    assert measure.label == label
    assert measure.duration == duration


@then(parsers.parse('measure "{name}" starts {offset:f} seconds into the request'))
def step_measure_offset(ctx: TimelineScenarioContext, name: str, offset: float) -> None:
    assert ctx.timer.get_measures()[name].relative_start == offset


@then(parsers.parse('a measurement error is raised for "{name}"'))
def step_measurement_error(ctx: TimelineScenarioContext, name: str) -> None:
    assert isinstance(ctx.error, MeasurementError)
    assert ctx.error.name == name


@then(parsers.parse('no measure named "{name}" is recorded'))
def step_no_measure(ctx: TimelineScenarioContext, name: str) -> None:
    assert name not in ctx.timer.get_measures()


@then(parsers.parse("the collected timeline has {n:d} measure(s)"))
def step_measure_count(ctx: TimelineScenarioContext, n: int) -> None:
    assert len(ctx.collected["measures"]) == n


@then(parsers.parse("the request duration is {duration:f}"))
def step_request_duration(ctx: TimelineScenarioContext, duration: float) -> None:
    assert ctx.collected["duration"] == duration
    assert ctx.timer.get_request_duration() == duration


@then("the operation error is propagated")
def step_operation_error(ctx: TimelineScenarioContext) -> None:
    assert isinstance(ctx.error, RuntimeError)
    assert str(ctx.error) == "operation failed"
