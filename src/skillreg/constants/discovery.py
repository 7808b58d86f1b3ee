"""Constants for skill folder discovery and file classification."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
SCRIPTS_DIRNAME: str = "scripts"
HIDDEN_ENTRY_PREFIX: str = "."

# Matched case-insensitively against entries beside the primary document.
DEFAULT_SUPPORTING_DOCUMENTS: tuple[str, ...] = (
    "reference.md",
    "examples.md",
    "forms.md",
)
