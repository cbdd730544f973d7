# tests/unit/core/test_unit_models.py — v1
"""Tests for core/models.py and core/errors.py."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from dirdigest.core.errors import (
    DirDigestError,
    DirectoryReadError,
    FileHashError,
    PipelineStateError,
    ReportWriteError,
)
from dirdigest.core.models import FileTask, ProgressUpdate, ResultRecord, RunSummary


class TestFileTask:
    def test_filename(self):
        t = FileTask(path=Path("/data/report.pdf"))
        assert t.filename == "report.pdf"
        assert t.is_dir is False

    def test_frozen(self):
        t = FileTask(path=Path("/data/a"))
        with pytest.raises(ValidationError):
            t.path = Path("/data/b")  # type: ignore[misc]


class TestResultRecord:
    def test_success(self):
        r = ResultRecord(display_name="a.txt", digest_hex="ab")
        assert r.is_failure is False

    def test_failure_default(self):
        r = ResultRecord(display_name="a.txt")
        assert r.digest_hex == ""
        assert r.is_failure is True

    def test_frozen(self):
        r = ResultRecord(display_name="a.txt", digest_hex="ab")
        with pytest.raises(ValidationError):
            r.digest_hex = "cd"  # type: ignore[misc]


class TestProgressUpdate:
    def test_str(self):
        u = ProgressUpdate(done=3, total=10, filename="a", ok=True)
        assert str(u) == "Progress: 3/10"


class TestRunSummary:
    def test_digests(self):
        s = RunSummary(
            directory="/d", report_path="/d/SHA256.md", total_files=2,
            hashed=1, failed=1, progress=2, duration_seconds=0.1,
            records=[ResultRecord(display_name="a", digest_hex="aa")],
        )
        assert s.digests == {"a": "aa"}
        assert s.hashed + s.failed == s.total_files


class TestErrors:
    @pytest.mark.parametrize("exc_type", [
        DirectoryReadError, ReportWriteError, PipelineStateError,
    ])
    def test_hierarchy(self, exc_type):
        assert issubclass(exc_type, DirDigestError)

    def test_io_errors(self):
        assert issubclass(DirectoryReadError, OSError)
        assert issubclass(FileHashError, OSError)
        assert issubclass(ReportWriteError, OSError)

    def test_file_hash_error_fields(self):
        e = FileHashError("/d/a.txt", "Permission denied")
        assert e.path == "/d/a.txt"
        assert e.reason == "Permission denied"
        assert str(e) == "/d/a.txt: Permission denied"
