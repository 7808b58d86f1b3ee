"""Constants for name normalization and sanitization."""

from __future__ import annotations

import re
from re import Pattern

NON_NAME_CHAR_PATTERN: Pattern[str] = re.compile(r"[^a-z0-9]+")
COLLAPSE_DASH_PATTERN: Pattern[str] = re.compile(r"-+")
SKILL_NAME_FALLBACK: str = "unnamed-skill"
