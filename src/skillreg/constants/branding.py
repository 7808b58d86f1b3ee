"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLREG"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLREG",
    "     // skill package validation",
)
CHECK_SUMMARY_TITLE: str = "Registry summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill registry loader"))
