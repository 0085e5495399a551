"""Domain exceptions: all public errors of pactreport.

Verification failures are NOT exceptions - they are recorded as data.
Exceptions here signal misuse of the reporter or I/O failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class PactReportError(Exception):
    """Base for all pactreport exceptions.

    Allows: except PactReportError to catch all library errors.
    """


class ReportStateError(PactReportError, RuntimeError):
    """Reporter called out of order.

    Inherits RuntimeError for semantic correctness (invalid state).
    """


class ReporterNotInitialisedError(ReportStateError):
    """Event received before initialise()."""

    def __init__(self, operation: str) -> None:
        """Initialize with the rejected operation name."""
        self.operation = operation
        super().__init__(f"{operation}() called before initialise()")


class NoCurrentExecutionError(ReportStateError):
    """Event addresses the current consumer execution, but none was started."""

    def __init__(self, operation: str) -> None:
        """Initialize with the rejected operation name."""
        self.operation = operation
        super().__init__(f"{operation}() called before start_consumer_execution()")


class NoCurrentInteractionError(ReportStateError):
    """Event addresses the current interaction, but none was described."""

    def __init__(self, operation: str) -> None:
        """Initialize with the rejected operation name."""
        self.operation = operation
        super().__init__(f"{operation}() called before record_interaction_description()")


class ReportParseError(PactReportError, ValueError):
    """Existing report file content is not a JSON document.

    Attributes:
        path: File that failed to parse (None when parsing raw text).
        reason: Why parsing failed.
    """

    def __init__(self, reason: str, path: Path | None = None) -> None:
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        where = f" {path}" if path is not None else ""
        super().__init__(f"Failed to parse report{where}: {reason}")


class ReportWriteError(PactReportError, OSError):
    """Report document could not be written.

    Attributes:
        path: Target report file.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write report {path}: {reason}")


class UnknownReporterError(PactReportError, LookupError):
    """No reporter registered under the requested name.

    Attributes:
        name: Requested reporter name.
        available: Registered reporter names.
    """

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown reporter '{name}', available: {', '.join(available)}")
