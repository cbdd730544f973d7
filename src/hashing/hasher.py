# src/hashing/hasher.py — v1
"""Streaming SHA-256 digest of a single file."""

from __future__ import annotations

import hashlib
from pathlib import Path

from dirdigest.core.errors import FileHashError

DEFAULT_CHUNK_SIZE = 64 * 1024


def compute_file_digest(
    file_path: str | Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Compute the lowercase hex SHA-256 of a file's contents.

    The file is read in ``chunk_size`` blocks so memory use stays bounded
    regardless of file size.

    Args:
        file_path: Path of the file to hash.
        chunk_size: Read buffer size in bytes.

    Returns:
        64-character lowercase hex digest.

    Raises:
        FileHashError: If the file cannot be opened or read.
        ValueError: If chunk_size is not positive.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be > 0, got {chunk_size}")

    sha256 = hashlib.sha256()
    try:
        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                sha256.update(chunk)
    except OSError as exc:
        raise FileHashError(str(file_path), exc.strerror or str(exc)) from exc
    return sha256.hexdigest()
