"""Reporter configuration.

Resolved once, when the reporter is constructed.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_NAME = "json"
DEFAULT_EXTENSION = ".json"

ENV_REPORT_DIR = "PACT_REPORT_DIR"
ENV_REPORT_EXT = "PACT_REPORT_EXT"


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Reporter configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        name: Reporter name. Also the report file stem until initialise()
            replaces it with the provider name.
        report_dir: Directory reports are written to. None = process
            working directory at reporter construction.
        file_extension: Report file extension, including the dot.
        indent: JSON indentation. None for compact output.
    """

    name: str = DEFAULT_NAME
    report_dir: Path | None = None
    file_extension: str = DEFAULT_EXTENSION
    indent: int | None = 2

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.file_extension.startswith("."):
            raise ValueError(f"file_extension must start with '.', got {self.file_extension!r}")
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")

    def resolved_report_dir(self) -> Path:
        """Report directory, defaulting to the current working directory."""
        return self.report_dir if self.report_dir is not None else Path.cwd()

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ReporterConfig:
        """Build config from a plain mapping (parsed TOML/JSON, CLI options).

        Recognised keys: name, report_dir, file_extension, indent.
        Missing keys keep their defaults.

        Raises:
            ValueError: Unknown key or invalid value.
        """
        known = {"name", "report_dir", "file_extension", "indent"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown reporter config keys: {sorted(unknown)}")

        report_dir = data.get("report_dir")
        indent = data.get("indent", 2)
        if indent is not None and not isinstance(indent, int):
            raise ValueError(f"indent must be int or None, got {type(indent).__name__}")

        return cls(
            name=str(data.get("name", DEFAULT_NAME)),
            report_dir=Path(str(report_dir)) if report_dir is not None else None,
            file_extension=str(data.get("file_extension", DEFAULT_EXTENSION)),
            indent=indent,
        )

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        name: str = DEFAULT_NAME,
    ) -> ReporterConfig:
        """Build config from PACT_REPORT_DIR / PACT_REPORT_EXT."""
        env = os.environ if environ is None else environ
        report_dir = env.get(ENV_REPORT_DIR)
        return cls(
            name=name,
            report_dir=Path(report_dir) if report_dir else None,
            file_extension=env.get(ENV_REPORT_EXT) or DEFAULT_EXTENSION,
        )
