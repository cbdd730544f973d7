# src/pipeline/orchestrator.py — v1
"""Checksum pipeline — top-level orchestrator for one directory.

Chains: scan → dispatch workers → aggregate → write report.
The aggregator consumes the result queue while the workers are still
running; the report is written only after the pool has closed the queue.

Usage:
    pipeline = ChecksumPipeline(settings)
    summary = await pipeline.run(Path("/data/releases"))
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING

from dirdigest.batch.scanner import DirectoryScanner
from dirdigest.config.settings import Settings
from dirdigest.core.models import RunSummary
from dirdigest.logging.context import clear_context, set_run_context
from dirdigest.pipeline.aggregator import Aggregator
from dirdigest.pipeline.progress import ProgressCallback, ProgressCounter
from dirdigest.pipeline.state import Phase, PipelineState
from dirdigest.pipeline.worker_pool import WorkerPool
from dirdigest.storage.local_writer import LocalWriter

if TYPE_CHECKING:
    from dirdigest.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)


class ChecksumPipeline:
    """Hash every eligible file of a directory and write the report.

    Args:
        settings: Application settings (defaults loaded from env).
        writer: Report storage backend (defaults to LocalWriter).
        progress_callback: Called with a ProgressUpdate after each file.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        writer: BaseOutputWriter | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._writer = writer or LocalWriter()
        self._progress_callback = progress_callback
        self._scanner = DirectoryScanner(self._settings.report_filename)
        self._pool = WorkerPool(
            report_filename=self._settings.report_filename,
            max_workers=self._settings.max_workers,
            chunk_size=self._settings.chunk_size,
        )
        self._state = PipelineState()

    @property
    def state(self) -> PipelineState:
        """State of the most recent run."""
        return self._state

    async def run(self, directory: Path) -> RunSummary:
        """Run the full pipeline over ``directory``.

        Any exception leaves the state at FAILED before it propagates.

        Raises:
            DirectoryReadError: Directory missing or unreadable (nothing written).
            ReportWriteError: Report could not be written (report discarded).
        """
        directory = Path(directory)
        state = PipelineState(directory=str(directory))
        self._state = state
        set_run_context(state.run_id, str(directory))
        t0 = time.perf_counter()
        try:
            return await self._run(directory, state, t0)
        except BaseException as exc:
            if state.can_transition(Phase.FAILED):
                self._advance(state, Phase.FAILED, error=str(exc) or type(exc).__name__)
            raise
        finally:
            clear_context()

    async def _run(self, directory: Path, state: PipelineState, t0: float) -> RunSummary:
        self._advance(state, Phase.DISPATCHING)
        tasks = self._pool.select(self._scanner.scan(directory))

        progress = ProgressCounter(len(tasks), self._progress_callback)
        results: asyncio.Queue = asyncio.Queue()
        aggregator = Aggregator()
        consumer = asyncio.create_task(aggregator.consume(results))

        self._advance(state, Phase.AWAITING_COMPLETION)
        try:
            await self._pool.run(tasks, results, progress)
        except BaseException:
            # The pool always closes the queue, so the consumer finishes.
            await consumer
            raise

        self._advance(state, Phase.AGGREGATING)
        body = await consumer

        self._advance(state, Phase.WRITING)
        report_path = directory / self._settings.report_filename
        await self._writer.write(str(report_path), body)

        self._advance(state, Phase.DONE)
        duration = time.perf_counter() - t0
        summary = RunSummary(
            directory=str(directory),
            report_path=str(report_path),
            total_files=progress.total,
            hashed=len(aggregator.records),
            failed=aggregator.failed,
            progress=progress.value,
            records=aggregator.records,
            duration_seconds=round(duration, 2),
        )
        logger.info(
            "Wrote %s: %d hashed, %d failed in %.2fs",
            report_path, summary.hashed, summary.failed, summary.duration_seconds,
        )
        return summary

    @staticmethod
    def _advance(state: PipelineState, target: Phase, error: str = "") -> None:
        state.transition(target, error=error)
        logger.debug("Pipeline %s -> %s", state.history[-2].value, target.value)


def compute_checksums(
    directory: Path,
    settings: Settings | None = None,
    progress_callback: ProgressCallback | None = None,
) -> RunSummary:
    """Synchronous convenience wrapper around ChecksumPipeline.run()."""
    pipeline = ChecksumPipeline(settings, progress_callback=progress_callback)
    return asyncio.run(pipeline.run(directory))
