"""JSON serializer: Report -> document -> text, text -> document.

Deterministic: keys in insertion order, sequences in record order.
Absent optional fields are omitted, not written as null.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pactreport.domain.exceptions import ReportParseError
from pactreport.domain.model.inputs import DescribedSource, FileSource, UrlSource
from pactreport.domain.model.verification import VerificationFailed, VerificationOk

if TYPE_CHECKING:
    from pathlib import Path

    from pactreport.domain.model.inputs import PactSource
    from pactreport.domain.model.report import (
        ConsumerRecord,
        ExecutionRecord,
        InteractionRecord,
        MetaData,
        Report,
    )
    from pactreport.domain.model.verification import VerificationOutcome

RESULT_OK = "OK"
RESULT_FAILED = "failed"


def report_to_document(report: Report) -> dict[str, object]:
    """Convert Report to JSON-serializable dict.

    Schema:
        {"metaData": {...}, "provider": {"name": ...}, "execution": [...]}
    """
    return {
        "metaData": _metadata_to_dict(report.metadata),
        "provider": {"name": report.provider_name},
        "execution": [_execution_to_dict(e) for e in report.executions],
    }


def serialise(document: object, *, indent: int | None = 2) -> str:
    """Render document as JSON text.

    Values JSON has no type for (bytes, sets, arbitrary objects) are
    written as their str() form.
    """
    return json.dumps(document, indent=indent, ensure_ascii=False, default=str)


def parse_document(text: str, path: Path | None = None) -> object:
    """Parse JSON text.

    Raises:
        ReportParseError: text is not valid JSON, holds an integer too long
            to convert, or nests deeper than the parser can recurse.
    """
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise ReportParseError(str(e) or type(e).__name__, path) from e


def _metadata_to_dict(metadata: MetaData) -> dict[str, object]:
    return {
        "date": metadata.date,
        "toolVersion": metadata.tool_version,
        "reportFormat": metadata.report_format,
    }


def _source_to_dict(source: PactSource) -> dict[str, object]:
    """Convert pact source to {"url": ...} or {"file": ...}."""
    match source:
        case UrlSource():
            return {"url": source.url}
        case FileSource():
            return {"file": str(source.path)}
        case DescribedSource():
            return {"file": source.description}


def _consumer_to_dict(consumer: ConsumerRecord) -> dict[str, object]:
    data: dict[str, object] = {"name": consumer.name}
    if consumer.source is not None:
        data["source"] = _source_to_dict(consumer.source)
    if consumer.notices is not None:
        data["notices"] = list(consumer.notices)
    return data


def _execution_to_dict(execution: ExecutionRecord) -> dict[str, object]:
    data: dict[str, object] = {
        "consumer": _consumer_to_dict(execution.consumer),
        "interactions": [_interaction_to_dict(i) for i in execution.interactions],
    }
    if execution.pending is not None:
        data["pending"] = execution.pending
    if execution.tag:
        data["tag"] = execution.tag
    if execution.result is not None:
        data["result"] = {"state": execution.result.state, "message": execution.result.message}
    return data


def _interaction_to_dict(record: InteractionRecord) -> dict[str, object]:
    data: dict[str, object] = {}
    if record.interaction is not None:
        data["interaction"] = dict(record.interaction)
    data["verification"] = _verification_to_dict(record.verification)
    return data


def _verification_to_dict(outcome: VerificationOutcome) -> dict[str, object]:
    """Convert outcome to {"result": "OK"} or {"result": "failed", ...evidence}."""
    match outcome:
        case VerificationOk():
            return {"result": RESULT_OK}
        case VerificationFailed():
            data: dict[str, object] = {"result": RESULT_FAILED}
            if outcome.message is not None:
                data["message"] = outcome.message
            if outcome.exception is not None:
                data["exception"] = {
                    "message": outcome.exception.message,
                    "stackTrace": list(outcome.exception.stack_trace),
                }
            if outcome.status is not None:
                data["status"] = list(outcome.status)
            if outcome.header is not None:
                data["header"] = dict(outcome.header)
            if outcome.body is not None:
                data["body"] = outcome.body
            if outcome.metadata is not None:
                data["metadata"] = dict(outcome.metadata)
            if outcome.cause is not None:
                data["cause"] = {"message": outcome.cause.message}
            return data
