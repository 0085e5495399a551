"""Tests for reporter registry."""

from pathlib import Path

import pytest

from pactreport.application.reporters import (
    BaseVerifierReporter,
    ConsoleReporter,
    JsonReporter,
    available_reporters,
    create_reporter,
)
from pactreport.domain.exceptions import PactReportError, UnknownReporterError
from pactreport.domain.model.configuration import ReporterConfig
from tests.factories import make_provider


class TestRegistry:
    """Tests for create_reporter()."""

    def test_available(self) -> None:
        """json and console registered."""
        assert set(available_reporters()) == {"json", "console"}

    def test_create_json(self, tmp_path: Path) -> None:
        """json reporter uses given config."""
        reporter = create_reporter("json", ReporterConfig(report_dir=tmp_path))
        assert isinstance(reporter, JsonReporter)
        assert reporter.report_dir == tmp_path

    def test_create_console(self) -> None:
        """console reporter created without config."""
        assert isinstance(create_reporter("console"), ConsoleReporter)

    def test_unknown(self) -> None:
        """Unknown name raises with available names."""
        with pytest.raises(UnknownReporterError) as exc_info:
            create_reporter("markdown")
        assert exc_info.value.name == "markdown"
        assert "json" in str(exc_info.value)
        assert isinstance(exc_info.value, PactReportError)
        assert isinstance(exc_info.value, LookupError)


class TestBaseVerifierReporter:
    """Observation events default to no-ops."""

    def test_defaults_are_noops(self) -> None:
        """Subclass implementing only lifecycle accepts every event."""

        class MinimalReporter(BaseVerifierReporter):
            def __init__(self) -> None:
                self.calls: list[str] = []

            def initialise(self, provider) -> None:
                self.calls.append("initialise")

            def finalize(self) -> None:
                self.calls.append("finalize")

        reporter = MinimalReporter()
        reporter.initialise(make_provider())
        reporter.warn_state_change_ignored("s")
        reporter.state_change_request_failed("s", "500", is_setup=True)
        reporter.warn_state_change_ignored_due_to_invalid_url("s", object(), is_setup=False)
        reporter.includes_headers()
        reporter.warn_publish_results_skipped_because_filtered()
        reporter.finalize()
        assert reporter.calls == ["initialise", "finalize"]

    def test_lifecycle_is_abstract(self) -> None:
        """initialise() and finalize() must be implemented."""
        with pytest.raises(TypeError):
            BaseVerifierReporter()  # type: ignore[abstract]

    def test_json_reporter_observation_events_are_noops(self, tmp_path: Path) -> None:
        """Observation events leave the JSON report unchanged."""
        reporter = JsonReporter(ReporterConfig(report_dir=tmp_path))
        reporter.initialise(make_provider())
        before = reporter.report
        reporter.state_for_interaction("s", is_setup=True)
        reporter.returns_a_response_which()
        reporter.generates_a_message_which()
        reporter.includes_metadata()
        reporter.display_failures({"a": "b"})
        assert reporter.report == before
