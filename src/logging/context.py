# src/logging/context.py — v1
"""Contextual logging support — attach run_id, directory, file to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging. asyncio tasks copy the context
# at creation, so a file set inside one worker task never leaks to another.
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_directory: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "directory", default=None
)
_file: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "file", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    directory: str | None = None
    file: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        run_id=_run_id.get(),
        directory=_directory.get(),
        file=_file.get(),
    )


def set_run_context(run_id: str, directory: str) -> None:
    """Set run-level context (called once per pipeline run)."""
    _run_id.set(run_id)
    _directory.set(directory)


def set_file_context(file: str | None) -> None:
    """Set file-level context (called inside each worker task)."""
    _file.set(file)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _directory.set(None)
    _file.set(None)
