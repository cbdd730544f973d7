# src/pipeline/worker_pool.py — v1
"""Worker pool — concurrent fan-out of per-file hashing.

Each eligible file gets its own asyncio task; the blocking read+digest runs
on a thread executor so files are hashed in parallel (hashlib releases the
GIL while digesting large buffers). Results are pushed onto a queue that is
closed with the ``CLOSED`` sentinel only after every task has been joined.
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from dirdigest.batch.scanner import is_eligible
from dirdigest.core.errors import FileHashError
from dirdigest.core.models import FileTask, ResultRecord
from dirdigest.hashing.hasher import DEFAULT_CHUNK_SIZE, compute_file_digest
from dirdigest.logging.context import set_file_context
from dirdigest.pipeline.progress import ProgressCounter

logger = logging.getLogger(__name__)

# End-of-stream marker put on the result queue once all workers are joined.
CLOSED = object()

HashFunction = Callable[..., str]


class WorkerPool:
    """Run the hasher over a batch of files concurrently.

    Args:
        report_filename: Report file name, never hashed (case-insensitive).
        max_workers: Thread cap. None = one thread per eligible file.
        chunk_size: Read buffer passed to the hasher.
        hasher: Digest function ``(path, chunk_size) -> hex``.
    """

    def __init__(
        self,
        report_filename: str = "SHA256.md",
        max_workers: int | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        hasher: HashFunction = compute_file_digest,
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._report_filename = report_filename
        self._max_workers = max_workers
        self._chunk_size = chunk_size
        self._hasher = hasher

    def select(self, tasks: list[FileTask]) -> list[FileTask]:
        """Drop directories and the report file from ``tasks``."""
        selected = []
        for task in tasks:
            if is_eligible(task, self._report_filename):
                selected.append(task)
            else:
                logger.debug("Skipping %s", task.path)
        return selected

    def worker_count(self, n_tasks: int) -> int:
        """Number of threads used for ``n_tasks`` files."""
        if self._max_workers is None:
            return max(n_tasks, 1)
        return min(self._max_workers, max(n_tasks, 1))

    async def run(
        self,
        tasks: list[FileTask],
        results: asyncio.Queue,
        progress: ProgressCounter,
    ) -> list[ResultRecord]:
        """Hash every task and publish one record per file.

        ``tasks`` must already have gone through ``select``. The queue
        receives ``CLOSED`` exactly once, after all tasks finished, even if a
        task failed unexpectedly.

        Args:
            tasks: Selected files to hash.
            results: Queue consumed by the aggregator.
            progress: Counter incremented once per completed file.

        Returns:
            All emitted records, failures included, in task order.
        """
        if not tasks:
            await results.put(CLOSED)
            return []

        n_workers = self.worker_count(len(tasks))
        logger.info("Dispatching %d files to %d workers", len(tasks), n_workers)

        with ThreadPoolExecutor(
            max_workers=n_workers, thread_name_prefix="dirdigest",
        ) as executor:
            try:
                outcomes = await asyncio.gather(
                    *(self._process(task, executor, results, progress) for task in tasks),
                    return_exceptions=True,
                )
            finally:
                await results.put(CLOSED)

        records: list[ResultRecord] = []
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
            records.append(outcome)
        return records

    async def _process(
        self,
        task: FileTask,
        executor: ThreadPoolExecutor,
        results: asyncio.Queue,
        progress: ProgressCounter,
    ) -> ResultRecord:
        """Hash one file, publish its record, then count it."""
        set_file_context(task.filename)
        loop = asyncio.get_running_loop()
        try:
            digest = await loop.run_in_executor(
                executor, self._hasher, task.path, self._chunk_size,
            )
        except FileHashError as exc:
            logger.error("Error calculating SHA256 for file %s: %s", task.path, exc.reason)
            record = ResultRecord(display_name=task.filename)
        else:
            record = ResultRecord(display_name=task.filename, digest_hex=digest)

        await results.put(record)
        progress.increment(task.filename, ok=not record.is_failure)
        return record
