"""Naming and description rules applied to skill metadata."""

from __future__ import annotations

import re
from re import Pattern

NAME_KEY: str = "name"
DESCRIPTION_KEY: str = "description"
REQUIRED_METADATA_KEYS: tuple[str, ...] = (NAME_KEY, DESCRIPTION_KEY)

NAME_MAX_LENGTH: int = 64
NAME_PATTERN: Pattern[str] = re.compile(r"[a-z0-9-]+")
RESERVED_NAME_TOKENS: tuple[str, ...] = ("anthropic", "claude")

DESCRIPTION_MAX_LENGTH: int = 1024
