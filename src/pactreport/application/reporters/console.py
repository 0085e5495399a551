"""Console reporter: verification progress as rich formatted text.

Writes as events arrive. Persists nothing.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape

from pactreport.application.reporters._base import BaseVerifierReporter
from pactreport.domain.model.details import (
    BodyComparisonResult,
    BodyTypeMismatch,
    DetailList,
    MismatchDetail,
    RawValue,
    body_matched,
)
from pactreport.domain.model.inputs import DescribedSource, FileSource, UrlSource

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

_OK = "[bold green]OK[/bold green]"
_FAILED = "[bold red]FAILED[/bold red]"


class ConsoleReporter(BaseVerifierReporter):
    """Console reporter: human-readable verification progress.

    Output goes to a TextIO (default: sys.stdout). Colors are used only
    when the stream is a terminal.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        width: int | None = None,
        force_terminal: bool | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            width: Console width. None = detect.
            force_terminal: Force (True) or disable (False) colors. None = detect.
        """
        self._console = Console(
            file=output if output is not None else sys.stdout,
            width=width,
            force_terminal=force_terminal,
            highlight=False,
            soft_wrap=True,
        )
        self._provider_name = ""
        self._interaction_count = 0
        self._failed_count = 0
        self._current_failed = False

    def _print(self, text: str = "") -> None:
        self._console.print(text)

    def _mark_failed(self) -> None:
        if not self._current_failed:
            self._current_failed = True
            self._failed_count += 1

    def _status(self, passed: bool) -> str:
        return _OK if passed else _FAILED

    # Run lifecycle

    def initialise(self, provider: ProviderInfo) -> None:
        """Remember provider, reset counters."""
        self._provider_name = provider.name
        self._interaction_count = 0
        self._failed_count = 0
        self._current_failed = False

    def finalize(self) -> None:
        """Print run summary."""
        self._print()
        summary = f"{self._interaction_count} interactions, {self._failed_count} failed"
        style = "bold red" if self._failed_count else "bold green"
        self._console.rule(f"[{style}]{escape(self._provider_name)}: {summary}[/{style}]")

    # Consumer execution

    def start_consumer_execution(self, consumer: ConsumerInfo, tag: str | None = None) -> None:
        """Print verification header for consumer."""
        self._print()
        line = (
            f"Verifying a pact between [bold]{escape(consumer.name)}[/bold]"
            f" and [bold]{escape(self._provider_name)}[/bold]"
        )
        if tag:
            line += f" [dim]\\[Using tag {escape(tag)}][/dim]"
        if consumer.pending:
            line += " [yellow]\\[PENDING][/yellow]"
        self._print(line)

    def record_consumer_source(self, source: PactSource) -> None:
        """Print where the pact came from."""
        match source:
            case UrlSource():
                self._print(f"  [dim]\\[from URL {escape(source.url)}][/dim]")
            case FileSource():
                self._print(f"  [dim]\\[Using File {escape(str(source.path))}][/dim]")
            case DescribedSource():
                self._print(f"  [dim]\\[Using {escape(source.description)}][/dim]")

    def record_load_failure(self, consumer: ConsumerInfo, message: str) -> None:
        """Print load failure."""
        self._print(
            f"  [bold red]Pact Load Failure[/bold red] for {escape(consumer.name)}: {escape(message)}"
        )

    def record_consumer_notices(self, notices: Sequence[VerificationNotice]) -> None:
        """Print broker notices."""
        if not notices:
            return
        self._print("  Notices:")
        for i, notice in enumerate(notices, start=1):
            self._print(f"    {i}) {escape(notice.text)}")

    # Interaction

    def record_interaction_description(self, interaction: Interaction) -> None:
        """Print interaction description."""
        self._interaction_count += 1
        self._current_failed = False
        self._print(f"  {escape(interaction.description)}")

    def state_for_interaction(self, state: str, *, is_setup: bool) -> None:
        """Print provider state."""
        if is_setup:
            self._print(f"  Given [bold]{escape(state)}[/bold]")

    def record_state_change_failure(
        self,
        state: str,
        error: BaseException,
        *,
        is_setup: bool = True,
    ) -> None:
        """Print state change failure."""
        self._mark_failed()
        phase = "setup" if is_setup else "teardown"
        self._print(
            f"         [red]State change '{escape(state)}' callback failed ({phase})[/red]: "
            f"{escape(str(error))}"
        )

    def record_request_failure(self, message: str, error: BaseException) -> None:
        """Print request failure."""
        self._mark_failed()
        self._print(f"      [red]{escape(message)}[/red]: {escape(str(error))}")

    def returns_a_response_which(self) -> None:
        """Print response section header."""
        self._print("    returns a response which")

    def generates_a_message_which(self) -> None:
        """Print message section header."""
        self._print("    generates a message which")

    def record_status_comparison(
        self,
        status: int,
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Print status comparison."""
        if not passed:
            self._mark_failed()
        self._print(f"      has status code [bold]{status}[/bold] ({self._status(passed)})")

    def includes_headers(self) -> None:
        """Print header section header."""
        self._print("      includes headers")

    def record_header_comparison(
        self,
        key: str,
        value: Sequence[str],
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Print header comparison."""
        if not passed:
            self._mark_failed()
        rendered = escape(", ".join(value))
        self._print(
            f'        "[bold]{escape(key)}[/bold]" with value "[bold]{rendered}[/bold]"'
            f" ({self._status(passed)})"
        )

    def record_body_comparison(self, outcome: BodyOutcome) -> None:
        """Print body comparison."""
        passed = body_matched(outcome)
        if not passed:
            self._mark_failed()
        self._print(f"      has a matching body ({self._status(passed)})")
        match outcome:
            case BodyTypeMismatch():
                self._print(f"        [red]{escape(outcome.description())}[/red]")
            case BodyComparisonResult():
                for path, mismatches in outcome.mismatches.items():
                    for mismatch in mismatches:
                        self._print(f"        [red]{escape(path)}[/red]: {escape(mismatch.mismatch)}")

    def includes_metadata(self) -> None:
        """Print metadata section header."""
        self._print("      includes message metadata")

    def record_metadata_comparison(
        self,
        key: str,
        value: object,
        passed: bool,
        detail: ComparisonDetail | None = None,
    ) -> None:
        """Print metadata comparison."""
        if not passed:
            self._mark_failed()
        self._print(
            f'        "[bold]{escape(key)}[/bold]" with value "[bold]{escape(str(value))}[/bold]"'
            f" ({self._status(passed)})"
        )
        if not passed and detail is not None:
            self._print(f"          [red]{escape(_detail_text(detail))}[/red]")

    def record_no_annotated_method(self, interaction: Interaction) -> None:
        """Print missing message producer."""
        self._mark_failed()
        self._print(
            f"      [red]No Annotated Methods Found For Interaction "
            f"'{escape(interaction.description)}'[/red]"
        )

    def record_verification_exception(self, interaction: Interaction, error: BaseException) -> None:
        """Print verification exception."""
        self._mark_failed()
        self._print(f"      [red]Verification Failed - {escape(str(error))}[/red]")

    # Warnings

    def warn_provider_has_no_consumers(self, provider: ProviderInfo) -> None:
        """Print missing pacts warning."""
        self._print(
            f"[yellow]WARNING: There are no consumers to verify for provider "
            f"'{escape(provider.name)}'[/yellow]"
        )

    def warn_pact_has_no_interactions(self, consumer: ConsumerInfo) -> None:
        """Print empty pact warning."""
        self._print(
            f"[yellow]WARNING: Pact file for consumer '{escape(consumer.name)}' "
            f"has no interactions[/yellow]"
        )

    def warn_state_change_ignored(self, state: str) -> None:
        """Print ignored state change warning."""
        self._print(
            f"         [yellow]WARNING: State Change ignored as there is no stateChange URL "
            f"for '{escape(state)}'[/yellow]"
        )

    def state_change_request_failed(self, state: str, http_status: str, *, is_setup: bool) -> None:
        """Print failed state change request."""
        phase = "setup" if is_setup else "teardown"
        self._print(
            f"         [red]State Change Request Failed - {escape(state)} ({phase}) "
            f"- {escape(http_status)}[/red]"
        )

    def warn_state_change_ignored_due_to_invalid_url(
        self,
        state: str,
        handler: object,
        *,
        is_setup: bool,
    ) -> None:
        """Print invalid state change URL warning."""
        self._print(
            f"         [yellow]WARNING: State Change ignored as there is no stateChange URL, "
            f"received \"{escape(str(handler))}\"[/yellow]"
        )

    def display_failures(self, failures: Mapping[str, str]) -> None:
        """Print failures summary."""
        if not failures:
            return
        self._print()
        self._print("[bold red]Failures:[/bold red]")
        for i, (description, reason) in enumerate(failures.items(), start=1):
            self._print()
            self._print(f"{i}) {escape(description)}")
            for line in reason.split("\n"):
                self._print(f"    {escape(line)}")

    def warn_publish_results_skipped_because_filtered(self) -> None:
        """Print skipped publishing warning."""
        self._print(
            "[yellow]WARNING: Skipping publishing of verification results as the "
            "interactions have been filtered[/yellow]"
        )

    def warn_publish_results_skipped_because_disabled(self, env_var: str) -> None:
        """Print disabled publishing warning."""
        self._print(
            f"[yellow]WARNING: Skipping publishing of verification results as it has been "
            f"disabled ({escape(env_var)} is not 'true')[/yellow]"
        )


def _detail_text(detail: ComparisonDetail) -> str:
    """Render detail as one line of text."""
    match detail:
        case MismatchDetail(message=message):
            return message
        case RawValue(value=value):
            return str(value)
        case DetailList(items=items):
            return "; ".join(_detail_text(item) for item in items)
