# src/core/errors.py — v1
"""Exception hierarchy for dirdigest.

Only DirectoryReadError and ReportWriteError end a run. FileHashError is
absorbed by the worker pool and turned into a skipped report row.
"""

from __future__ import annotations


class DirDigestError(Exception):
    """Base exception."""


class DirectoryReadError(DirDigestError, OSError):
    """Input directory is missing or cannot be listed."""


class FileHashError(DirDigestError, OSError):
    """A single file could not be opened or read while hashing."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ReportWriteError(DirDigestError, OSError):
    """Report destination could not be created or written."""


class PipelineStateError(DirDigestError):
    """Illegal pipeline state transition."""
