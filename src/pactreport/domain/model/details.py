"""Comparison details passed with failed comparisons.

Tagged variants consumed by exhaustive match, never by attribute sniffing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MismatchDetail:
    """Structured mismatch reduced to its human-readable message."""

    message: str


@dataclass(frozen=True, slots=True)
class RawValue:
    """Detail with no mismatch structure. Rendered as-is.

    JSON-compatible values (str, number, bool, None, list, dict) are written
    as-is. Anything else is written as its str() form.
    """

    value: object


@dataclass(frozen=True, slots=True)
class DetailList:
    """Several details for one comparison (e.g. one per header value)."""

    items: tuple[MismatchDetail | RawValue, ...]


ComparisonDetail = MismatchDetail | DetailList | RawValue


@dataclass(frozen=True, slots=True)
class HeaderMismatch:
    """Header value mismatch produced by the comparison engine."""

    header_key: str
    expected: str
    actual: str
    mismatch: str

    def to_detail(self) -> MismatchDetail:
        """Reduce to a report detail."""
        return MismatchDetail(self.mismatch)


@dataclass(frozen=True, slots=True)
class BodyMismatch:
    """Single body mismatch at a JSON path."""

    path: str
    mismatch: str
    expected: object = None
    actual: object = None
    diff: str | None = None

    def to_json(self) -> dict[str, object]:
        """Render in report form."""
        data: dict[str, object] = {
            "expected": self.expected,
            "actual": self.actual,
            "mismatch": self.mismatch,
            "path": self.path,
        }
        if self.diff is not None:
            data["diff"] = self.diff
        return data


@dataclass(frozen=True, slots=True)
class BodyTypeMismatch:
    """Bodies could not be compared: content types differ."""

    expected: str
    actual: str

    def description(self) -> str:
        """Human-readable reason."""
        return (
            f"Expected a body of '{self.expected}' but the actual content type was '{self.actual}'"
        )


@dataclass(frozen=True, slots=True)
class BodyComparisonResult:
    """Bodies compared: mismatches grouped by path plus a rendered diff.

    No mismatches = bodies match.
    """

    mismatches: Mapping[str, tuple[BodyMismatch, ...]] = field(default_factory=dict)
    diff: tuple[str, ...] = ()

    @property
    def matched(self) -> bool:
        """Check if bodies match."""
        return not any(self.mismatches.values())

    def to_json(self) -> dict[str, object]:
        """Render full structured diff in report form."""
        return {
            "mismatches": {
                path: [m.to_json() for m in items] for path, items in self.mismatches.items()
            },
            "diff": list(self.diff),
        }


BodyOutcome = BodyTypeMismatch | BodyComparisonResult


def body_matched(outcome: BodyOutcome) -> bool:
    """Check if body outcome is a pass."""
    match outcome:
        case BodyTypeMismatch():
            return False
        case BodyComparisonResult():
            return outcome.matched
