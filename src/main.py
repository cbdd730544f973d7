# src/main.py — v1
"""CLI entry point — hash a directory into a SHA256.md table.

Usage:
    dirdigest -p <directory> [options]
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from dirdigest.config.settings import ConfigurationError, load_settings
from dirdigest.core.errors import DirectoryReadError, ReportWriteError
from dirdigest.core.models import ProgressUpdate, RunSummary
from dirdigest.logging.logger import configure_from_settings, get_logger
from dirdigest.pipeline.orchestrator import ChecksumPipeline
from dirdigest.version import __version__

logger = get_logger("cli")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # An empty -p would otherwise mean the current directory
    if not args.path:
        print("Please provide a target folder path using -p flag")
        return 1
    directory = Path(args.path)

    try:
        settings = load_settings(**_settings_overrides(args))
        configure_from_settings(settings, verbose=args.verbose)
    except (ConfigurationError, ValidationError, ValueError, OSError) as exc:
        print(f"Invalid configuration: {exc}")
        return 1

    pipeline = ChecksumPipeline(settings, progress_callback=_print_progress)
    try:
        summary = asyncio.run(pipeline.run(directory))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except DirectoryReadError as exc:
        print(f"Error reading directory: {exc}")
        return 1
    except ReportWriteError as exc:
        print(f"Error writing to {settings.report_filename}: {exc}")
        return 1
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        print(f"Fatal error: {exc}")
        return 1

    _print_summary(summary, settings.report_filename)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="dirdigest",
        description=f"dirdigest v{__version__} — SHA-256 table for a directory",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-p", "--path", default=None,
        help="Target folder path",
    )
    parser.add_argument(
        "-w", "--workers", type=int, default=None,
        help="Max concurrent hashing threads (default: one per file)",
    )
    parser.add_argument(
        "--log-format", choices=["text", "json"], default=None,
        help="Log output format (default: from settings)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser


def _settings_overrides(args: argparse.Namespace) -> dict[str, object]:
    """Map CLI flags onto Settings fields; unset flags keep env values."""
    overrides: dict[str, object] = {}
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.log_format is not None:
        overrides["log_format"] = args.log_format
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return overrides


def _print_progress(update: ProgressUpdate) -> None:
    print(update, flush=True)


def _print_summary(summary: RunSummary, report_filename: str) -> None:
    """Print the confirmation and elapsed-time lines."""
    print(f"Table has been written to {report_filename} successfully.")
    if summary.failed:
        print(f"{summary.failed} file(s) could not be hashed and were left out.")
    print(f"Total time elapsed: {summary.duration_seconds:.2f}s")


if __name__ == "__main__":
    sys.exit(main())
