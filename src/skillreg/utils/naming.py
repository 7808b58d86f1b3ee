"""String normalization helpers for skill names."""

from __future__ import annotations

from skillreg.constants.naming import COLLAPSE_DASH_PATTERN, NON_NAME_CHAR_PATTERN, SKILL_NAME_FALLBACK
from skillreg.constants.policy import NAME_MAX_LENGTH, RESERVED_NAME_TOKENS


def suggest_skill_name(raw_name: str) -> str:
    """Derive a policy-conforming name from *raw_name* for use in hints."""
    normalized = raw_name.strip().lower()
    for token in RESERVED_NAME_TOKENS:
        normalized = normalized.replace(token, "")
    normalized = NON_NAME_CHAR_PATTERN.sub("-", normalized)
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized)
    normalized = normalized.strip("-")[:NAME_MAX_LENGTH].rstrip("-")
    return normalized or SKILL_NAME_FALLBACK
