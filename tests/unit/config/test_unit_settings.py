# tests/unit/config/test_unit_settings.py — v1
"""Tests for config/settings.py — typed Settings and validation rules."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from dirdigest.config.settings import ConfigurationError, Settings, load_settings


class TestSettingsDefaults:
    def test_report_filename(self):
        s = Settings(_env_file=None)
        assert s.report_filename == "SHA256.md"

    def test_unbounded_workers(self):
        s = Settings(_env_file=None)
        assert s.max_workers is None

    def test_logging_defaults(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_format == "text"
        assert s.log_file is None


class TestSettingsEnv:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("DIRDIGEST_MAX_WORKERS", "4")
        monkeypatch.setenv("DIRDIGEST_LOG_FORMAT", "json")
        s = Settings(_env_file=None)
        assert s.max_workers == 4
        assert s.log_format == "json"

    def test_env_file(self, tmp_path: Path):
        env = tmp_path / ".env"
        env.write_text("DIRDIGEST_CHUNK_SIZE=1024\n", encoding="utf-8")
        s = Settings(_env_file=str(env))
        assert s.chunk_size == 1024


class TestSettingsValidation:
    def test_zero_workers(self):
        with pytest.raises(ConfigurationError, match="MAX_WORKERS"):
            Settings(_env_file=None, max_workers=0)

    def test_zero_chunk_size(self):
        with pytest.raises(ConfigurationError, match="CHUNK_SIZE"):
            Settings(_env_file=None, chunk_size=0)

    def test_multiple_errors_joined(self):
        with pytest.raises(ConfigurationError, match="MAX_WORKERS.*CHUNK_SIZE"):
            Settings(_env_file=None, max_workers=-1, chunk_size=-1)

    def test_report_filename_with_directory(self):
        with pytest.raises(ValidationError, match="bare file name"):
            Settings(_env_file=None, report_filename="out/SHA256.md")

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="TRACE")


class TestLoadSettings:
    def test_overrides(self):
        s = load_settings(_env_file=None, max_workers=2)
        assert s.max_workers == 2
