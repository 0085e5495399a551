"""Report tree: the document a JSON reporter builds during one run.

Records are immutable. The builder replaces a record instead of mutating it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from pactreport.domain.model.inputs import PactSource
from pactreport.domain.model.verification import VerificationOutcome

REPORT_FORMAT = "0.1.0"
LOAD_FAILURE_STATE = "Pact Load Failure"


@dataclass(frozen=True, slots=True)
class MetaData:
    """Run metadata. Replaced wholesale on merge (latest run wins)."""

    date: str
    tool_version: str
    report_format: str = REPORT_FORMAT


@dataclass(frozen=True, slots=True)
class ConsumerRecord:
    """Consumer entry of an execution record.

    Attributes:
        name: Consumer name.
        source: Where the pact came from. None = not reported.
        notices: Broker notices, in order. None = not reported.
    """

    name: str
    source: PactSource | None = None
    notices: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class LoadFailure:
    """Whole-consumer failure: the pact could not be loaded."""

    message: str
    state: str = LOAD_FAILURE_STATE


@dataclass(frozen=True, slots=True)
class InteractionRecord:
    """One verified interaction.

    Attributes:
        interaction: Snapshot of the expected exchange. None only for the
            record synthesized when a state change fails before any
            interaction was described.
        verification: Outcome, OK until a failure is recorded.
    """

    interaction: Mapping[str, object] | None
    verification: VerificationOutcome


@dataclass(frozen=True, slots=True)
class ExecutionRecord:
    """Verification of one consumer's pact.

    Attributes:
        consumer: Consumer entry.
        interactions: Interaction records in verification order.
        pending: Pact is pending. None only for the record synthesized
            by a load failure.
        tag: Tag the pact was selected by.
        result: Load failure, set only when the pact could not be loaded.
    """

    consumer: ConsumerRecord
    interactions: tuple[InteractionRecord, ...] = ()
    pending: bool | None = None
    tag: str | None = None
    result: LoadFailure | None = None


@dataclass(frozen=True, slots=True)
class Report:
    """Root of the report document for one provider."""

    metadata: MetaData
    provider_name: str
    executions: tuple[ExecutionRecord, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.provider_name:
            raise ValueError("provider_name must not be empty")

    @property
    def is_empty(self) -> bool:
        """Check if report has no execution content."""
        return len(self.executions) == 0
