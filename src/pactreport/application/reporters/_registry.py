"""Reporter registry: reporter name -> implementation."""

from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import TYPE_CHECKING

from pactreport.application.reporters.console import ConsoleReporter
from pactreport.application.reporters.json_reporter import JsonReporter
from pactreport.domain.exceptions import UnknownReporterError
from pactreport.domain.model.configuration import ReporterConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from pactreport.domain.ports.reporter import VerifierReporterProtocol


def _json(config: ReporterConfig) -> VerifierReporterProtocol:
    return JsonReporter(config)


def _console(config: ReporterConfig) -> VerifierReporterProtocol:
    return ConsoleReporter()


_REPORTERS: Mapping[str, Callable[[ReporterConfig], VerifierReporterProtocol]] = MappingProxyType(
    {
        "json": _json,
        "console": _console,
    }
)


def available_reporters() -> tuple[str, ...]:
    """Registered reporter names."""
    return tuple(_REPORTERS)


def create_reporter(name: str, config: ReporterConfig | None = None) -> VerifierReporterProtocol:
    """Instantiate reporter registered under name.

    Args:
        name: Reporter name ("json", "console").
        config: Reporter configuration. Its name is replaced by name.

    Returns:
        New reporter instance.

    Raises:
        UnknownReporterError: No reporter registered under name.
    """
    factory = _REPORTERS.get(name)
    if factory is None:
        raise UnknownReporterError(name, available_reporters())

    resolved = replace(config, name=name) if config is not None else ReporterConfig(name=name)
    return factory(resolved)
