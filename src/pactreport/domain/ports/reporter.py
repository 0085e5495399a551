"""Verifier reporter protocol: the event-sink contract.

The orchestrator calls every reporter with the same ordered event stream.
Each reporter decides which events matter for its output; events it does
not use are no-ops, never errors.

Ordering contract (single-threaded, strictly sequential):
    initialise
    (start_consumer_execution
        [record_consumer_source] [record_consumer_notices] [record_load_failure]
        (record_interaction_description
            [state_for_interaction] [record_state_change_failure]
            [returns_a_response_which | generates_a_message_which]
            [record_*_comparison ...] [record_*_failure ...])*
    )*
    finalize
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from pactreport.domain.model.details import BodyOutcome, ComparisonDetail
    from pactreport.domain.model.inputs import (
        ConsumerInfo,
        Interaction,
        PactSource,
        ProviderInfo,
        VerificationNotice,
    )


class VerifierReporterProtocol(Protocol):
    """Contract for verification reporters.

    pactreport provides JsonReporter (persisted document) and
    ConsoleReporter (human-readable stream). Users implement this
    Protocol for other formats.
    """

    # Run lifecycle

    def initialise(self, provider: ProviderInfo) -> None:
        """Start a run for provider."""
        ...

    def finalize(self) -> None:
        """End the run and emit the output."""
        ...

    # Consumer execution

    def start_consumer_execution(self, consumer: ConsumerInfo, tag: str | None = None) -> None:
        """Start verifying consumer's pact."""
        ...

    def record_consumer_source(self, source: PactSource) -> None:
        """Pact of the current consumer was loaded from source."""
        ...

    def record_load_failure(self, consumer: ConsumerInfo, message: str) -> None:
        """Pact of consumer could not be loaded."""
        ...

    def record_consumer_notices(self, notices: Sequence[VerificationNotice]) -> None:
        """Broker notices for the current consumer."""
        ...

    # Interaction

    def record_interaction_description(self, interaction: Interaction) -> None:
        """Start verifying interaction."""
        ...

    def record_state_change_failure(
        self,
        state: str,
        error: BaseException,
        *,
        is_setup: bool = True,
    ) -> None:
        """State change callback for state raised error."""
        ...

    def record_request_failure(self, message: str, error: BaseException) -> None:
        """Request to the provider failed."""
        ...

    def record_status_comparison(
        self,
        status: int,
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Response status compared against expected status."""
        ...

    def record_header_comparison(
        self,
        key: str,
        value: Sequence[str],
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Header key compared against expected value."""
        ...

    def record_body_comparison(self, outcome: BodyOutcome) -> None:
        """Body compared against expected body."""
        ...

    def record_metadata_comparison(
        self,
        key: str,
        value: object,
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Message metadata key compared against expected value."""
        ...

    def record_no_annotated_method(self, interaction: Interaction) -> None:
        """No test method could produce the message for interaction."""
        ...

    def record_verification_exception(self, interaction: Interaction, error: BaseException) -> None:
        """Verifying interaction raised error."""
        ...

    # Observation only

    def warn_provider_has_no_consumers(self, provider: ProviderInfo) -> None:
        """No pacts were found for provider."""
        ...

    def warn_pact_has_no_interactions(self, consumer: ConsumerInfo) -> None:
        """Pact of consumer contains no interactions."""
        ...

    def state_for_interaction(self, state: str, *, is_setup: bool) -> None:
        """State change for state is about to run."""
        ...

    def warn_state_change_ignored(self, state: str) -> None:
        """No state change handler configured for state."""
        ...

    def state_change_request_failed(self, state: str, http_status: str, *, is_setup: bool) -> None:
        """State change request for state answered with an error status."""
        ...

    def warn_state_change_ignored_due_to_invalid_url(
        self,
        state: str,
        handler: object,
        *,
        is_setup: bool,
    ) -> None:
        """State change handler for state is not a usable URL."""
        ...

    def returns_a_response_which(self) -> None:
        """Response comparisons follow."""
        ...

    def generates_a_message_which(self) -> None:
        """Message comparisons follow."""
        ...

    def includes_headers(self) -> None:
        """Header comparisons follow."""
        ...

    def includes_metadata(self) -> None:
        """Metadata comparisons follow."""
        ...

    def display_failures(self, failures: Mapping[str, str]) -> None:
        """Summary of failures, description -> reason."""
        ...

    def warn_publish_results_skipped_because_filtered(self) -> None:
        """Verification results not published: interactions were filtered."""
        ...

    def warn_publish_results_skipped_because_disabled(self, env_var: str) -> None:
        """Verification results not published: disabled by env_var."""
        ...
