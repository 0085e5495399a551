"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

from pactreport.application.reporters.json_reporter import JsonReporter
from pactreport.domain.model.configuration import ReporterConfig
from pactreport.domain.model.details import BodyComparisonResult, BodyMismatch
from pactreport.domain.model.inputs import ConsumerInfo, Interaction, ProviderInfo, ProviderState

# Fixed report date - consistent across all tests
DEFAULT_DATE = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone(timedelta(hours=2)))


def fixed_clock(date: datetime = DEFAULT_DATE):
    """Clock returning date on every call."""
    return lambda: date


def make_reporter(
    report_dir: Path,
    *,
    date: datetime = DEFAULT_DATE,
    name: str = "json",
    file_extension: str = ".json",
) -> JsonReporter:
    """Create a JsonReporter writing under report_dir with a fixed clock."""
    config = ReporterConfig(name=name, report_dir=report_dir, file_extension=file_extension)
    return JsonReporter(config, clock=fixed_clock(date))


def make_provider(name: str = "MyProvider") -> ProviderInfo:
    """Create a ProviderInfo for tests."""
    return ProviderInfo(name)


def make_consumer(name: str = "ConsumerA", *, pending: bool = False) -> ConsumerInfo:
    """Create a ConsumerInfo for tests."""
    return ConsumerInfo(name, pending=pending)


def make_interaction(
    description: str = "a request",
    *,
    states: tuple[str, ...] = (),
    with_http: bool = False,
) -> Interaction:
    """Create an Interaction for tests.

    Args:
        description: Interaction description
        states: Provider state names
        with_http: Add a minimal request/response pair
    """
    contents: dict[str, object] = {}
    if with_http:
        contents = {
            "request": {"method": "GET", "path": "/orders/1"},
            "response": {"status": 200, "body": {"id": 1}},
        }
    return Interaction(
        description=description,
        provider_states=tuple(ProviderState(s) for s in states),
        contents=contents,
    )


def make_body_diff(path: str = "$.id", mismatch: str = "Expected 1 but received 2") -> BodyComparisonResult:
    """Create a failing BodyComparisonResult with one mismatch at path."""
    return BodyComparisonResult(
        mismatches={path: (BodyMismatch(path=path, mismatch=mismatch, expected=1, actual=2),)},
        diff=("-  \"id\": 1", "+  \"id\": 2"),
    )


def raised(error: BaseException) -> BaseException:
    """Raise and catch error so it carries a traceback."""
    try:
        raise error
    except BaseException as e:  # noqa: BLE001
        return e


def start_run(
    reporter: JsonReporter,
    provider: str = "MyProvider",
    consumer: str = "ConsumerA",
    description: str = "a request",
) -> None:
    """initialise + start_consumer_execution + record_interaction_description."""
    reporter.initialise(make_provider(provider))
    reporter.start_consumer_execution(make_consumer(consumer))
    reporter.record_interaction_description(make_interaction(description))
