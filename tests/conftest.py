# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides sample directories with known SHA-256 digests. Everything runs on
``tmp_path``; no network, no fixed paths.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from dirdigest.config.settings import Settings
from dirdigest.logging.context import clear_context


@pytest.fixture(autouse=True)
def _reset_logging():
    """Fresh log context per test; drop handlers installed by setup_logging()."""
    clear_context()
    yield
    clear_context()
    root = logging.getLogger("dirdigest")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any .env file or DIRDIGEST_* variables."""
    return Settings(_env_file=None)


@pytest.fixture
def hello_world_dir(tmp_path: Path) -> Path:
    """Directory with a.txt="hello" and b.txt="world"."""
    (tmp_path / "a.txt").write_bytes(b"hello")
    (tmp_path / "b.txt").write_bytes(b"world")
    return tmp_path


@pytest.fixture
def mixed_dir(tmp_path: Path) -> Path:
    """Files plus a subdirectory and a stale report with odd casing."""
    (tmp_path / "one.bin").write_bytes(b"\x00\x01\x02")
    (tmp_path / "two.txt").write_text("two", encoding="utf-8")
    (tmp_path / "empty.dat").write_bytes(b"")
    sub = tmp_path / "nested"
    sub.mkdir()
    (sub / "inner.txt").write_text("not hashed", encoding="utf-8")
    (tmp_path / "sha256.MD").write_text("stale report", encoding="utf-8")
    return tmp_path


@pytest.fixture
def broken_link_dir(tmp_path: Path) -> Path:
    """a.txt plus a dangling symlink that cannot be opened."""
    (tmp_path / "a.txt").write_bytes(b"hello")
    try:
        (tmp_path / "dangling.lnk").symlink_to(tmp_path / "missing-target")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported on this platform")
    return tmp_path


def _parse_rows(body: str) -> dict[str, str]:
    rows: dict[str, str] = {}
    for line in body.splitlines()[2:]:
        cells = [c.strip() for c in line.strip().strip("|").split("|")]
        if len(cells) == 2:
            rows[cells[0]] = cells[1]
    return rows


@pytest.fixture
def parse_report():
    """Parse a report body into ``{filename: digest}``, skipping the header.

    Compares runs by row content; row order is not deterministic.
    """
    return _parse_rows
