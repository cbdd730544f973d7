# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Every field can be set through a ``DIRDIGEST_``-prefixed environment
variable (e.g. ``DIRDIGEST_MAX_WORKERS=8``). CLI flags override these values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_prefix="DIRDIGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Report ===
    report_filename: str = "SHA256.md"

    # === Worker pool ===
    # None = one worker per eligible file (unbounded fan-out)
    max_workers: int | None = None
    chunk_size: int = 64 * 1024

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("report_filename")
    @classmethod
    def validate_report_filename(cls, v: str) -> str:  # noqa: N805
        v = v.strip()
        if not v or Path(v).name != v:
            raise ValueError("report_filename must be a bare file name")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate numeric limits that pydantic types cannot express."""
        errors: list[str] = []

        if self.max_workers is not None and self.max_workers < 1:
            errors.append("MAX_WORKERS must be >= 1 when set")

        if self.chunk_size <= 0:
            errors.append("CHUNK_SIZE must be > 0")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (CLI flags, tests).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
