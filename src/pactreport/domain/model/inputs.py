"""Verifier inputs: what the orchestrator hands to a reporter.

Plain immutable values. The reporter never loads or interprets pacts,
it only snapshots what it is given.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ProviderInfo:
    """Provider under verification."""

    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("provider name must not be empty")


@dataclass(frozen=True, slots=True)
class ConsumerInfo:
    """Consumer whose pact is verified.

    Attributes:
        name: Consumer name.
        pending: Pact is informational-only, failures are not enforced.
    """

    name: str
    pending: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("consumer name must not be empty")


@dataclass(frozen=True, slots=True)
class ProviderState:
    """Provider state an interaction depends on."""

    name: str
    params: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Interaction:
    """One expected exchange of a pact.

    Attributes:
        description: Human description ("a request for an order").
        provider_states: States the provider must be in.
        contents: Remaining pact fields (request, response, contents, ...),
            already in their pact JSON form.
    """

    description: str
    provider_states: tuple[ProviderState, ...] = ()
    contents: Mapping[str, object] = field(default_factory=dict)

    def to_map(self) -> dict[str, object]:
        """Snapshot in pact JSON form, used as the report's interaction entry."""
        data: dict[str, object] = {"description": self.description}
        if self.provider_states:
            data["providerStates"] = [
                {"name": state.name, "params": dict(state.params)} if state.params else {"name": state.name}
                for state in self.provider_states
            ]
        data.update(self.contents)
        return data


@dataclass(frozen=True, slots=True)
class VerificationNotice:
    """Notice a pact broker attaches to a pact (e.g. pending/WIP reasons)."""

    when: str
    text: str


@dataclass(frozen=True, slots=True)
class UrlSource:
    """Pact fetched from a URL (broker or plain HTTP)."""

    url: str


@dataclass(frozen=True, slots=True)
class FileSource:
    """Pact loaded from a local file."""

    path: Path


@dataclass(frozen=True, slots=True)
class DescribedSource:
    """Pact loaded from local storage without a concrete path (classpath, stream, ...)."""

    description: str


PactSource = UrlSource | FileSource | DescribedSource
