# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


# === WORK ITEMS ===


class FileTask(BaseModel):
    """One directory entry to hash. Consumed by exactly one worker.

    ``is_dir`` is captured from the directory listing so eligibility checks
    never stat the path again.
    """

    model_config = {"frozen": True}

    path: Path
    is_dir: bool = False

    @property
    def filename(self) -> str:
        return self.path.name


class ResultRecord(BaseModel):
    """Outcome of hashing one file.

    An empty ``digest_hex`` marks a failed file: it is counted in progress
    but never rendered into the report.
    """

    model_config = {"frozen": True}

    display_name: str
    digest_hex: str = ""

    @property
    def is_failure(self) -> bool:
        return not self.digest_hex


# === PROGRESS ===


class ProgressUpdate(BaseModel):
    """Snapshot emitted after each completed task."""

    model_config = {"frozen": True}

    done: int
    total: int
    filename: str
    ok: bool

    def __str__(self) -> str:
        return f"Progress: {self.done}/{self.total}"


# === RUN RESULT ===


class RunSummary(BaseModel):
    """Summary of one checksum run over a directory."""

    directory: str
    report_path: str
    total_files: int
    hashed: int
    failed: int
    progress: int
    duration_seconds: float
    records: list[ResultRecord] = Field(default_factory=list)

    @property
    def digests(self) -> dict[str, str]:
        """Map of filename to hex digest for every hashed file."""
        return {r.display_name: r.digest_hex for r in self.records}
