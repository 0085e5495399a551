"""Report file: read prior content, write atomically."""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from typing import TYPE_CHECKING

import structlog

from pactreport.domain.exceptions import ReportParseError, ReportWriteError
from pactreport.infrastructure.serializer import parse_document

if TYPE_CHECKING:
    from pathlib import Path

logger = structlog.get_logger(__name__)


class ReportFile:
    """Report document on disk for one provider.

    Not safe for concurrent writers: two processes finalizing the same
    provider's report need external locking.
    """

    def __init__(self, path: Path) -> None:
        """Initialize with target path.

        Args:
            path: Report file. Parent directory must exist at write time.
        """
        self._path = path

    @property
    def path(self) -> Path:
        """Target path."""
        return self._path

    def read_existing(self) -> object | None:
        """Parse prior report content.

        Returns:
            Parsed JSON value, or None when the file is missing, empty,
            unreadable, or not valid JSON (the caller overwrites in all
            of these cases).
        """
        try:
            if not self._path.is_file() or self._path.stat().st_size == 0:
                return None
            return parse_document(self._path.read_text(encoding="utf-8"), self._path)
        except (OSError, ReportParseError, UnicodeDecodeError) as e:
            logger.warning("prior_report_unreadable", path=str(self._path), reason=str(e))
            return None

    def write(self, text: str) -> None:
        """Replace file content with text.

        Writes to a temporary file in the same directory, then renames it
        over the target, so readers never see a truncated report. The
        result keeps the mode of the file it replaces. A new file gets the
        mode a plain open() would give it under the current umask.

        Raises:
            ReportWriteError: Temporary file could not be written or renamed.
        """
        directory = self._path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
            )
        except OSError as e:
            raise ReportWriteError(self._path, str(e)) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(text)
            os.chmod(tmp_name, self._target_mode())
            os.replace(tmp_name, self._path)
        except OSError as e:
            _remove_quietly(tmp_name)
            raise ReportWriteError(self._path, str(e)) from e

    def _target_mode(self) -> int:
        """Permission bits for the written file."""
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            return 0o666 & ~_current_umask()


def _current_umask() -> int:
    """Process umask. Reading it requires setting it, so restore at once."""
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _remove_quietly(name: str) -> None:
    """Remove leftover temporary file. Missing file is fine."""
    with contextlib.suppress(FileNotFoundError):
        os.unlink(name)
