# src/batch/scanner.py — v1
"""Directory scanner — lists the eligible files of one directory.

Scanning is flat: subdirectories are never entered. The report file itself
is excluded so a rerun never hashes its own previous output.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dirdigest.core.errors import DirectoryReadError
from dirdigest.core.models import FileTask

logger = logging.getLogger(__name__)


def is_report_file(name: str, report_filename: str) -> bool:
    """Case-insensitive match against the report's own file name."""
    return name.casefold() == report_filename.casefold()


def is_eligible(task: FileTask, report_filename: str) -> bool:
    """True if ``task`` is neither a directory nor the report file."""
    return not task.is_dir and not is_report_file(task.filename, report_filename)


class DirectoryScanner:
    """Discover the files of a directory that should be hashed."""

    def __init__(self, report_filename: str = "SHA256.md") -> None:
        self._report_filename = report_filename

    @property
    def report_filename(self) -> str:
        return self._report_filename

    def scan(self, scan_root: Path) -> list[FileTask]:
        """List eligible files directly inside ``scan_root``.

        Args:
            scan_root: Directory to list.

        Returns:
            One FileTask per eligible entry, sorted by file name.

        Raises:
            DirectoryReadError: If the directory is missing or unreadable,
                or an entry's type cannot be determined.
        """
        try:
            with os.scandir(scan_root) as it:
                entries = sorted((
                    FileTask(path=Path(scan_root) / entry.name, is_dir=entry.is_dir())
                    for entry in it
                ), key=lambda t: t.filename)
        except OSError as exc:
            raise DirectoryReadError(
                f"{scan_root}: {exc.strerror or exc}"
            ) from exc

        tasks = [t for t in entries if is_eligible(t, self._report_filename)]
        logger.info(
            "Scanned %s: %d eligible files (%d entries skipped)",
            scan_root, len(tasks), len(entries) - len(tasks),
        )
        return tasks
