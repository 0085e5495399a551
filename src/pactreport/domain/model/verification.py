"""Per-interaction verification outcome."""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExceptionDetail:
    """Exception captured as data.

    Attributes:
        message: str(exception).
        stack_trace: Formatted traceback, one entry per line.
    """

    message: str
    stack_trace: tuple[str, ...]

    @classmethod
    def from_exception(cls, error: BaseException) -> ExceptionDetail:
        """Capture message and formatted traceback of error."""
        lines = [
            line
            for chunk in traceback.format_exception(error)
            for line in chunk.rstrip("\n").split("\n")
        ]
        return cls(message=str(error), stack_trace=tuple(lines))


@dataclass(frozen=True, slots=True)
class Cause:
    """Failure without exception (e.g. nothing could verify the interaction)."""

    message: str


@dataclass(frozen=True, slots=True)
class VerificationOk:
    """Interaction verified."""


@dataclass(frozen=True, slots=True)
class VerificationFailed:
    """Interaction failed. Each field is evidence, None = not reported.

    Attributes:
        message: Failure summary.
        exception: Exception raised while verifying.
        status: Status mismatch, one entry per line.
        header: Header name -> rendered mismatch.
        body: Rendered body mismatch (description or structured diff).
        metadata: Message metadata key -> rendered mismatch.
        cause: Failure reason without exception.
    """

    message: str | None = None
    exception: ExceptionDetail | None = None
    status: tuple[str, ...] | None = None
    header: Mapping[str, object] | None = None
    body: object = None
    metadata: Mapping[str, object] | None = None
    cause: Cause | None = None


VerificationOutcome = VerificationOk | VerificationFailed

