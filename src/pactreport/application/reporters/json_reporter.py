"""JSON reporter: builds the report document and persists it per provider.

Events address the "current" consumer execution and interaction through
explicit cursors. Calls out of order fail fast with ReportStateError.

Lifecycle events are logged through structlog (initialise at debug,
finalize at info). Call pactreport.infrastructure.log_config.configure_logging
to filter them; structlog's unconfigured default prints all of them.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING

import structlog

from pactreport import __version__
from pactreport.application.reporters._base import BaseVerifierReporter
from pactreport.application.services.merger import merge_documents
from pactreport.domain.exceptions import (
    NoCurrentExecutionError,
    NoCurrentInteractionError,
    ReporterNotInitialisedError,
)
from pactreport.domain.model.configuration import ReporterConfig
from pactreport.domain.model.details import (
    BodyComparisonResult,
    BodyTypeMismatch,
    DetailList,
    MismatchDetail,
    RawValue,
    body_matched,
)
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
from pactreport.infrastructure.report_file import ReportFile
from pactreport.infrastructure.serializer import report_to_document, serialise

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from pactreport.domain.model.details import BodyOutcome, ComparisonDetail
    from pactreport.domain.model.inputs import (
        ConsumerInfo,
        Interaction,
        PactSource,
        ProviderInfo,
        VerificationNotice,
    )
    from pactreport.domain.model.verification import VerificationOutcome

logger = structlog.get_logger(__name__)

NO_ANNOTATED_METHODS = "No Annotated Methods Found For Interaction"


def _local_now() -> datetime:
    return datetime.now().astimezone()


class JsonReporter(BaseVerifierReporter):
    """JSON reporter: one document per provider, merged across runs.

    Output file is <provider name><extension> under the report directory.
    A prior document for the same provider keeps its executions; the new
    run's executions are appended and its metaData replaces the old one.
    """

    def __init__(
        self,
        config: ReporterConfig | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            clock: Source of the report date. Default: local time with zone.
        """
        self._config = config or ReporterConfig()
        self._report_dir = self._config.resolved_report_dir()
        self._report_file = ReportFile(
            self._report_dir / f"{self._config.name}{self._config.file_extension}"
        )
        self._clock = clock or _local_now

        self._metadata: MetaData | None = None
        self._provider_name: str | None = None
        self._executions: list[ExecutionRecord] = []
        self._execution_index: int | None = None
        self._interaction_index: int | None = None

    @property
    def report_dir(self) -> Path:
        """Directory reports are written to."""
        return self._report_dir

    @property
    def report_file(self) -> Path:
        """File the report is written to."""
        return self._report_file.path

    @property
    def report(self) -> Report:
        """Report built so far.

        Raises:
            ReporterNotInitialisedError: initialise() not called.
        """
        metadata, provider_name = self._require_initialised("report")
        return Report(
            metadata=metadata,
            provider_name=provider_name,
            executions=tuple(self._executions),
        )

    # Run lifecycle

    def initialise(self, provider: ProviderInfo) -> None:
        """Start a fresh report for provider.

        The report file becomes <provider name><extension>, replacing the
        configured name. The report directory is created if missing.
        """
        self._metadata = MetaData(date=self._clock().isoformat(), tool_version=__version__)
        self._provider_name = provider.name
        self._executions = []
        self._execution_index = None
        self._interaction_index = None

        self._report_dir.mkdir(parents=True, exist_ok=True)
        self._report_file = ReportFile(
            self._report_dir / f"{provider.name}{self._config.file_extension}"
        )
        logger.debug(
            "report_initialised",
            provider=provider.name,
            path=str(self._report_file.path),
            configured_name=self._config.name,
        )

    def finalize(self) -> None:
        """Persist the report, merging with a prior report for the same provider.

        No-op when not initialised or no consumer execution was recorded.
        The in-memory report is discarded after writing.

        Raises:
            ReportWriteError: Report file could not be written.
        """
        if self._metadata is None or self._provider_name is None:
            logger.debug("report_skipped_empty", path=str(self._report_file.path))
            return

        report = self.report
        if report.is_empty:
            logger.debug("report_skipped_empty", path=str(self._report_file.path))
            return

        existing = self._report_file.read_existing()
        result = merge_documents(existing, report_to_document(report), report.provider_name)
        self._report_file.write(serialise(result.document, indent=self._config.indent))

        logger.info(
            f"report_{result.decision.value}",
            provider=report.provider_name,
            path=str(self._report_file.path),
            executions=len(report.executions),
        )
        self._reset()

    # Consumer execution

    def start_consumer_execution(self, consumer: ConsumerInfo, tag: str | None = None) -> None:
        """Append an execution record for consumer and make it current."""
        self._require_initialised("start_consumer_execution")
        self._executions.append(
            ExecutionRecord(
                consumer=ConsumerRecord(name=consumer.name),
                pending=consumer.pending,
                tag=tag or None,
            )
        )
        self._execution_index = len(self._executions) - 1
        self._interaction_index = None

    def record_consumer_source(self, source: PactSource) -> None:
        """Set source of the current consumer."""
        index = self._require_execution("record_consumer_source")
        execution = self._executions[index]
        self._executions[index] = replace(
            execution, consumer=replace(execution.consumer, source=source)
        )

    def record_load_failure(self, consumer: ConsumerInfo, message: str) -> None:
        """Mark the current execution as a load failure.

        Load failures can precede any start_consumer_execution(). With no
        execution recorded yet, a minimal record for consumer is created.
        """
        self._require_initialised("record_load_failure")
        if not self._executions:
            self._executions.append(ExecutionRecord(consumer=ConsumerRecord(name=consumer.name)))
            self._execution_index = 0
            self._interaction_index = None

        index = self._require_execution("record_load_failure")
        self._executions[index] = replace(self._executions[index], result=LoadFailure(message))

    def record_consumer_notices(self, notices: Sequence[VerificationNotice]) -> None:
        """Set broker notices of the current consumer."""
        index = self._require_execution("record_consumer_notices")
        execution = self._executions[index]
        self._executions[index] = replace(
            execution,
            consumer=replace(execution.consumer, notices=tuple(n.text for n in notices)),
        )

    # Interaction

    def record_interaction_description(self, interaction: Interaction) -> None:
        """Append an interaction record, verification OK, and make it current."""
        index = self._require_execution("record_interaction_description")
        execution = self._executions[index]
        record = InteractionRecord(interaction=interaction.to_map(), verification=VerificationOk())
        self._executions[index] = replace(
            execution, interactions=(*execution.interactions, record)
        )
        self._interaction_index = len(execution.interactions)

    def record_state_change_failure(
        self,
        state: str,
        error: BaseException,
        *,
        is_setup: bool = True,
    ) -> None:
        """Fail the current interaction with the state change error.

        State changes can run before any interaction is described. Then a
        record holding only this verification is appended.
        """
        outcome = VerificationFailed(
            message=f"State change '{state}' callback failed",
            exception=ExceptionDetail.from_exception(error),
        )
        index = self._require_execution("record_state_change_failure")
        if self._interaction_index is None:
            execution = self._executions[index]
            record = InteractionRecord(interaction=None, verification=outcome)
            self._executions[index] = replace(
                execution, interactions=(*execution.interactions, record)
            )
            self._interaction_index = len(execution.interactions)
            return

        self._set_verification("record_state_change_failure", outcome)

    def record_request_failure(self, message: str, error: BaseException) -> None:
        """Fail the current interaction: the request could not be made."""
        self._set_verification(
            "record_request_failure",
            VerificationFailed(message=message, exception=ExceptionDetail.from_exception(error)),
        )

    def record_status_comparison(
        self,
        status: int,
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Record status mismatch lines. No-op if passed."""
        if passed:
            return
        failed = self._current_failure("record_status_comparison")
        self._set_verification(
            "record_status_comparison", replace(failed, status=_status_lines(detail))
        )

    def record_header_comparison(
        self,
        key: str,
        value: Sequence[str],
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Record header mismatch under header[key]. No-op if passed."""
        if passed:
            return
        failed = self._current_failure("record_header_comparison")
        header = {**(failed.header or {}), key: _render_detail(detail)}
        self._set_verification("record_header_comparison", replace(failed, header=header))

    def record_body_comparison(self, outcome: BodyOutcome) -> None:
        """Record body mismatch. No-op if bodies matched."""
        if body_matched(outcome):
            return
        failed = self._current_failure("record_body_comparison")
        self._set_verification(
            "record_body_comparison", replace(failed, body=_render_body(outcome))
        )

    def record_metadata_comparison(
        self,
        key: str,
        value: object,
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Record metadata mismatch under metadata[key]. No-op if passed."""
        if passed:
            return
        failed = self._current_failure("record_metadata_comparison")
        metadata = {**(failed.metadata or {}), key: _render_detail(detail)}
        self._set_verification("record_metadata_comparison", replace(failed, metadata=metadata))

    def record_no_annotated_method(self, interaction: Interaction) -> None:
        """Fail the current interaction: nothing could produce the message."""
        self._set_verification(
            "record_no_annotated_method",
            VerificationFailed(cause=Cause(NO_ANNOTATED_METHODS)),
        )

    def record_verification_exception(self, interaction: Interaction, error: BaseException) -> None:
        """Fail the current interaction with error."""
        self._set_verification(
            "record_verification_exception",
            VerificationFailed(exception=ExceptionDetail.from_exception(error)),
        )

    # Cursors

    def _require_initialised(self, operation: str) -> tuple[MetaData, str]:
        if self._metadata is None or self._provider_name is None:
            raise ReporterNotInitialisedError(operation)
        return self._metadata, self._provider_name

    def _require_execution(self, operation: str) -> int:
        self._require_initialised(operation)
        if self._execution_index is None:
            raise NoCurrentExecutionError(operation)
        return self._execution_index

    def _require_interaction(self, operation: str) -> tuple[int, int]:
        execution_index = self._require_execution(operation)
        if self._interaction_index is None:
            raise NoCurrentInteractionError(operation)
        return execution_index, self._interaction_index

    def _current_failure(self, operation: str) -> VerificationFailed:
        """Current verification as a failure, keeping evidence already recorded."""
        execution_index, interaction_index = self._require_interaction(operation)
        verification = self._executions[execution_index].interactions[interaction_index].verification
        match verification:
            case VerificationOk():
                return VerificationFailed()
            case VerificationFailed():
                return verification

    def _set_verification(self, operation: str, outcome: VerificationOutcome) -> None:
        """Overwrite verification of the current interaction."""
        execution_index, interaction_index = self._require_interaction(operation)
        execution = self._executions[execution_index]
        interactions = list(execution.interactions)
        interactions[interaction_index] = replace(
            interactions[interaction_index], verification=outcome
        )
        self._executions[execution_index] = replace(execution, interactions=tuple(interactions))

    def _reset(self) -> None:
        self._metadata = None
        self._provider_name = None
        self._executions = []
        self._execution_index = None
        self._interaction_index = None


def _status_lines(detail: ComparisonDetail | None) -> tuple[str, ...]:
    """Render status mismatch as lines."""
    match detail:
        case None:
            return ()
        case MismatchDetail(message=message):
            return tuple(message.split("\n"))
        case RawValue(value=value):
            return tuple(str(value).split("\n"))
        case DetailList(items=items):
            return tuple(line for item in items for line in _status_lines(item))


def _render_detail(detail: ComparisonDetail | None) -> object:
    """Render header/metadata detail: mismatches as messages, raw values as-is."""
    match detail:
        case None:
            return None
        case MismatchDetail(message=message):
            return message
        case RawValue(value=value):
            return value
        case DetailList(items=items):
            return [_render_detail(item) for item in items]


def _render_body(outcome: BodyOutcome) -> object:
    """Render body mismatch: type mismatch as description, diff as structure."""
    match outcome:
        case BodyTypeMismatch():
            return outcome.description()
        case BodyComparisonResult():
            return outcome.to_json()
