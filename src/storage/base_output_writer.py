# src/storage/base_output_writer.py — v1
"""Abstract output writer interface for the checksum report."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseOutputWriter(ABC):
    """Unified interface for report storage backends."""

    @abstractmethod
    async def write(self, path: str, content: str) -> None:
        """Create or truncate ``path`` and write ``content`` verbatim.

        Raises:
            ReportWriteError: If the destination cannot be created or written.
        """
