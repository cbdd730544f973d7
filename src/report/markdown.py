# src/report/markdown.py — v1
"""Markdown table rendering for the checksum report."""

from __future__ import annotations

from dirdigest.core.models import ResultRecord

DIGEST_COLUMN = "SHA256"

REPORT_HEADER = f"| Filename | {DIGEST_COLUMN} |\n| --- | --- |\n"


def render_row(record: ResultRecord) -> str:
    """Render one record as a table row (newline-terminated)."""
    return f"| {record.display_name} | {record.digest_hex} |\n"
