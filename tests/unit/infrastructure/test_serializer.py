"""Tests for infrastructure/serializer.py."""

import json
from pathlib import Path

import pytest

from pactreport.domain.exceptions import ReportParseError
from pactreport.domain.model.inputs import FileSource, UrlSource
from pactreport.domain.model.report import (
    ConsumerRecord,
    ExecutionRecord,
    InteractionRecord,
    LoadFailure,
    MetaData,
    Report,
)
from pactreport.domain.model.verification import (
    Cause,
    ExceptionDetail,
    VerificationFailed,
    VerificationOk,
)
from pactreport.infrastructure.serializer import parse_document, report_to_document, serialise


def _report(*executions: ExecutionRecord) -> Report:
    return Report(
        metadata=MetaData(date="2024-05-01T12:30:00+02:00", tool_version="1.2.3"),
        provider_name="MyProvider",
        executions=executions,
    )


class TestReportToDocument:
    """Tests for report_to_document()."""

    def test_root(self) -> None:
        """Root keys and metaData names."""
        document = report_to_document(_report())
        assert document == {
            "metaData": {
                "date": "2024-05-01T12:30:00+02:00",
                "toolVersion": "1.2.3",
                "reportFormat": "0.1.0",
            },
            "provider": {"name": "MyProvider"},
            "execution": [],
        }

    def test_execution_key_order(self) -> None:
        """Execution keys: consumer, interactions, pending, tag, result."""
        execution = ExecutionRecord(
            consumer=ConsumerRecord(
                name="A",
                source=UrlSource("http://broker"),
                notices=("n1",),
            ),
            pending=False,
            tag="main",
            result=LoadFailure("boom"),
        )
        data = report_to_document(_report(execution))["execution"][0]
        assert list(data) == ["consumer", "interactions", "pending", "tag", "result"]
        assert list(data["consumer"]) == ["name", "source", "notices"]
        assert data["result"] == {"state": "Pact Load Failure", "message": "boom"}

    def test_optional_fields_omitted(self) -> None:
        """Absent fields are not written as null."""
        execution = ExecutionRecord(consumer=ConsumerRecord(name="A"))
        data = report_to_document(_report(execution))["execution"][0]
        assert data == {"consumer": {"name": "A"}, "interactions": []}

    def test_file_source(self) -> None:
        """File source rendered as path string."""
        execution = ExecutionRecord(
            consumer=ConsumerRecord(name="A", source=FileSource(Path("/pacts/a.json")))
        )
        data = report_to_document(_report(execution))["execution"][0]
        assert data["consumer"]["source"] == {"file": str(Path("/pacts/a.json"))}

    def test_failed_verification_key_order(self) -> None:
        """Verification keys in fixed order."""
        outcome = VerificationFailed(
            message="m",
            exception=ExceptionDetail("e", ("line 1", "line 2")),
            status=("s",),
            header={"h": "x"},
            body="b",
            metadata={"k": "v"},
            cause=Cause("c"),
        )
        execution = ExecutionRecord(
            consumer=ConsumerRecord(name="A"),
            interactions=(InteractionRecord({"description": "d"}, outcome),),
        )
        record = report_to_document(_report(execution))["execution"][0]["interactions"][0]
        assert list(record) == ["interaction", "verification"]
        assert list(record["verification"]) == [
            "result",
            "message",
            "exception",
            "status",
            "header",
            "body",
            "metadata",
            "cause",
        ]
        assert record["verification"]["exception"] == {
            "message": "e",
            "stackTrace": ["line 1", "line 2"],
        }

    def test_ok_verification(self) -> None:
        """OK verification has result only."""
        execution = ExecutionRecord(
            consumer=ConsumerRecord(name="A"),
            interactions=(InteractionRecord({"description": "d"}, VerificationOk()),),
        )
        record = report_to_document(_report(execution))["execution"][0]["interactions"][0]
        assert record["verification"] == {"result": "OK"}


class TestSerialise:
    """Tests for serialise() and parse_document()."""

    def test_deterministic(self) -> None:
        """Same document renders to the same text."""
        document = report_to_document(_report())
        assert serialise(document) == serialise(report_to_document(_report()))

    def test_keeps_insertion_order(self) -> None:
        """Keys are not sorted."""
        assert serialise({"b": 1, "a": 2}, indent=None) == '{"b": 1, "a": 2}'

    def test_unicode_kept(self) -> None:
        """Non-ASCII text written as-is."""
        assert "Zürich" in serialise({"name": "Zürich"})

    def test_parse(self) -> None:
        """Valid JSON parsed."""
        assert parse_document('{"a": [1]}') == {"a": [1]}

    def test_parse_error(self) -> None:
        """Invalid JSON raises ReportParseError."""
        with pytest.raises(ReportParseError) as exc_info:
            parse_document("{oops", Path("r.json"))
        assert exc_info.value.path == Path("r.json")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
        assert isinstance(exc_info.value, ValueError)

    def test_non_json_values_rendered_as_text(self) -> None:
        """Values without a JSON type are written as their str() form."""
        text = serialise({"raw": b"abc", "set": frozenset({1})}, indent=None)
        assert json.loads(text) == {"raw": "b'abc'", "set": "frozenset({1})"}

    def test_parse_huge_integer(self) -> None:
        """Integer literal past the conversion limit raises ReportParseError."""
        with pytest.raises(ReportParseError) as exc_info:
            parse_document("1" * 5000, Path("r.json"))
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_parse_deep_nesting(self) -> None:
        """Nesting past the recursion limit raises ReportParseError."""
        with pytest.raises(ReportParseError) as exc_info:
            parse_document("[" * 200_000, Path("r.json"))
        assert isinstance(exc_info.value.__cause__, RecursionError)
