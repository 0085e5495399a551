"""Merge a run's report document with the prior document for the same provider."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeGuard


class MergeDecision(Enum):
    """How the prior document was treated."""

    MERGED = "merged"
    OVERWRITTEN = "overwritten"


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Document to write and how it was obtained."""

    document: dict[str, object]
    decision: MergeDecision


def merge_documents(
    existing: object | None,
    current: Mapping[str, object],
    provider_name: str,
) -> MergeResult:
    """Decide what to persist for this run.

    Merges when existing is a document for the same provider: metaData is
    replaced by the current run's, current executions are appended after
    the existing ones. Anything else (None, not an object, different
    provider, malformed execution list) is overwritten by current.

    Args:
        existing: Parsed prior file content. None = no usable prior file.
        current: This run's document.
        provider_name: Provider of this run.

    Returns:
        MergeResult with the document to write.

    Raises:
        TypeError: current has no execution list.
    """
    current_executions = current.get("execution")
    if not isinstance(current_executions, list):
        raise TypeError("current document must have an execution list")

    if not _is_same_provider(existing, provider_name):
        return MergeResult(dict(current), MergeDecision.OVERWRITTEN)

    prior_executions = existing.get("execution", [])
    if not isinstance(prior_executions, list):
        return MergeResult(dict(current), MergeDecision.OVERWRITTEN)

    merged = dict(existing)
    merged["metaData"] = current["metaData"]
    merged["execution"] = [*prior_executions, *current_executions]
    return MergeResult(merged, MergeDecision.MERGED)


def _is_same_provider(existing: object | None, provider_name: str) -> TypeGuard[Mapping[str, object]]:
    """Check existing is a JSON object whose provider.name is provider_name."""
    if not isinstance(existing, Mapping):
        return False
    provider = existing.get("provider")
    if not isinstance(provider, Mapping):
        return False
    return provider.get("name") == provider_name
