# src/storage/local_writer.py — v1
"""Local filesystem report writer (default backend)."""

from __future__ import annotations

import logging

from dirdigest.core.errors import ReportWriteError
from dirdigest.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)

# File names that are not valid UTF-8 reach us as surrogate escapes
# (PEP 383); this turns them back into their original bytes.
_ENCODING_ERRORS = "surrogateescape"


class LocalWriter(BaseOutputWriter):
    """Write reports to the local filesystem."""

    async def write(self, path: str, content: str) -> None:
        """Write the report body as UTF-8, truncating any previous file.

        The parent directory is not created: a missing destination directory
        is a write failure.
        """
        try:
            # newline="" keeps "\n" row endings on every platform
            with open(
                path, "w", encoding="utf-8", errors=_ENCODING_ERRORS, newline="",
            ) as f:
                f.write(content)
        except OSError as exc:
            raise ReportWriteError(f"{path}: {exc.strerror or exc}") from exc
        except UnicodeError as exc:
            raise ReportWriteError(f"{path}: {exc.reason}") from exc
        logger.debug("Wrote %d characters to %s", len(content), path)
