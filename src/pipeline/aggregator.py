# src/pipeline/aggregator.py — v1
"""Aggregator — single consumer that folds result records into the report."""

from __future__ import annotations

import asyncio
import logging

from dirdigest.core.models import ResultRecord
from dirdigest.pipeline.worker_pool import CLOSED
from dirdigest.report.markdown import REPORT_HEADER, render_row

logger = logging.getLogger(__name__)


class Aggregator:
    """Accumulate rows in arrival order onto a header-initialised body.

    Failed records (empty digest) are counted but never rendered.
    """

    def __init__(self) -> None:
        self._body = REPORT_HEADER
        self._records: list[ResultRecord] = []
        self._failed = 0

    @property
    def body(self) -> str:
        return self._body

    @property
    def records(self) -> list[ResultRecord]:
        return list(self._records)

    @property
    def failed(self) -> int:
        return self._failed

    def add(self, record: ResultRecord) -> None:
        if record.is_failure:
            self._failed += 1
            return
        self._records.append(record)
        self._body += render_row(record)

    async def consume(self, results: asyncio.Queue) -> str:
        """Drain ``results`` until the pool closes it.

        Returns:
            The complete report body.
        """
        while True:
            item = await results.get()
            if item is CLOSED:
                break
            self.add(item)

        logger.debug(
            "Aggregated %d rows (%d failed files excluded)",
            len(self._records), self._failed,
        )
        return self._body
