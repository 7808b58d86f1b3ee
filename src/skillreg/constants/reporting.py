"""Constants for registry exports and stdout formatting."""

from __future__ import annotations

REPORT_TEMP_SUFFIX: str = ".tmp"

SCHEMA_VERSION: str = "1.0.0"

DESCRIPTION_PREVIEW_LENGTH: int = 72

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

ISSUE_KIND_COLORS: dict[str, str] = {
    "malformed-metadata": ANSI_RED,
    "missing-field": ANSI_RED,
    "duplicate-name": ANSI_YELLOW,
    "name-policy-violation": ANSI_YELLOW,
    "description-policy-violation": ANSI_YELLOW,
}
