# src/pipeline/progress.py — v1
"""Progress counter shared by all worker tasks of one run."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from dirdigest.core.models import ProgressUpdate

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressUpdate], None]


class ProgressCounter:
    """Counts completed tasks, successes and failures alike.

    Increment and read happen under one lock, so concurrent callers never
    lose an update and each observes a distinct value. The worker pool
    increments only after a file's hashing has fully finished, so the value
    never includes in-flight tasks.
    """

    def __init__(self, total: int, callback: ProgressCallback | None = None) -> None:
        if total < 0:
            raise ValueError(f"total must be >= 0, got {total}")
        self._total = total
        self._done = 0
        self._lock = threading.Lock()
        self._callback = callback

    @property
    def total(self) -> int:
        return self._total

    @property
    def value(self) -> int:
        """Number of tasks completed so far."""
        with self._lock:
            return self._done

    def increment(self, filename: str = "", ok: bool = True) -> ProgressUpdate:
        """Record one completed task and notify the callback.

        Returns:
            Snapshot carrying the post-increment count.
        """
        with self._lock:
            self._done += 1
            done = self._done
        update = ProgressUpdate(done=done, total=self._total, filename=filename, ok=ok)
        logger.debug("%s (%s)", update, filename)
        if self._callback is not None:
            self._callback(update)
        return update
