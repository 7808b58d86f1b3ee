"""Issue kinds for skill validation and stable codes for config validation."""

from __future__ import annotations

from typing import Final

ISSUE_MISSING_FIELD: Final = "missing-field"
ISSUE_MALFORMED_METADATA: Final = "malformed-metadata"
ISSUE_NAME_POLICY: Final = "name-policy-violation"
ISSUE_DESCRIPTION_POLICY: Final = "description-policy-violation"
ISSUE_DUPLICATE_NAME: Final = "duplicate-name"

ALL_ISSUE_KINDS: tuple[str, ...] = (
    ISSUE_MISSING_FIELD,
    ISSUE_MALFORMED_METADATA,
    ISSUE_NAME_POLICY,
    ISSUE_DESCRIPTION_POLICY,
    ISSUE_DUPLICATE_NAME,
)

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # unreadable file or invalid YAML
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG007: str = "CFG007"  # value out of range
CFG010: str = "CFG010"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "primary_document",
        "scripts_dir",
        "supporting_documents",
        "max_file_kb",
        "workers",
    }
)

STRING_KEYS: tuple[str, ...] = ("primary_document", "scripts_dir")
POSITIVE_INT_KEYS: tuple[str, ...] = ("max_file_kb", "workers")
LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("supporting_documents",)
