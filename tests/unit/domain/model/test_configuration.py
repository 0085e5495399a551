"""Tests for domain/model/configuration.py."""

from pathlib import Path

import pytest

from pactreport.domain.model.configuration import ReporterConfig


class TestReporterConfig:
    """Tests for ReporterConfig."""

    def test_defaults(self) -> None:
        """Defaults: json, cwd, .json, indent 2."""
        config = ReporterConfig()
        assert config.name == "json"
        assert config.report_dir is None
        assert config.file_extension == ".json"
        assert config.indent == 2

    def test_resolved_report_dir_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """No report_dir resolves to working directory."""
        monkeypatch.chdir(tmp_path)
        assert ReporterConfig().resolved_report_dir().resolve() == tmp_path.resolve()

    def test_resolved_report_dir_explicit(self, tmp_path: Path) -> None:
        """Explicit report_dir is kept."""
        assert ReporterConfig(report_dir=tmp_path).resolved_report_dir() == tmp_path

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"name": ""}, "name"),
            ({"file_extension": "json"}, "file_extension"),
            ({"indent": -1}, "indent"),
        ],
    )
    def test_invalid(self, kwargs: dict[str, object], match: str) -> None:
        """FAIL-FIRST validation."""
        with pytest.raises(ValueError, match=match):
            ReporterConfig(**kwargs)

    def test_immutable(self) -> None:
        """Frozen dataclass."""
        config = ReporterConfig()
        with pytest.raises(AttributeError):
            config.name = "other"  # type: ignore[misc]


class TestFromMapping:
    """Tests for ReporterConfig.from_mapping()."""

    def test_all_keys(self) -> None:
        """All keys applied."""
        config = ReporterConfig.from_mapping(
            {"name": "json", "report_dir": "build/reports", "file_extension": ".txt", "indent": None}
        )
        assert config.report_dir == Path("build/reports")
        assert config.file_extension == ".txt"
        assert config.indent is None

    def test_empty(self) -> None:
        """Empty mapping gives defaults."""
        assert ReporterConfig.from_mapping({}) == ReporterConfig()

    def test_unknown_key(self) -> None:
        """Unknown keys rejected."""
        with pytest.raises(ValueError, match="unknown"):
            ReporterConfig.from_mapping({"reportDir": "x"})

    def test_bad_indent(self) -> None:
        """Non-int indent rejected."""
        with pytest.raises(ValueError, match="indent"):
            ReporterConfig.from_mapping({"indent": "2"})


class TestFromEnviron:
    """Tests for ReporterConfig.from_environ()."""

    def test_reads_variables(self) -> None:
        """PACT_REPORT_DIR and PACT_REPORT_EXT applied."""
        config = ReporterConfig.from_environ(
            {"PACT_REPORT_DIR": "/tmp/reports", "PACT_REPORT_EXT": ".out"}
        )
        assert config.report_dir == Path("/tmp/reports")
        assert config.file_extension == ".out"

    def test_unset_variables(self) -> None:
        """Missing or empty variables keep defaults."""
        config = ReporterConfig.from_environ({"PACT_REPORT_DIR": ""})
        assert config.report_dir is None
        assert config.file_extension == ".json"

    def test_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default environ is os.environ."""
        monkeypatch.setenv("PACT_REPORT_EXT", ".env-ext")
        assert ReporterConfig.from_environ().file_extension == ".env-ext"
