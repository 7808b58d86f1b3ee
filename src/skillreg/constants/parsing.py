"""Constants for metadata block parsing."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
BYTE_ORDER_MARK: str = "\ufeff"
COMMENT_PREFIX: str = "#"

METADATA_LINE_PATTERN: Pattern[str] = re.compile(r"^(?P<key>[A-Za-z0-9_.-]+)[ \t]*:(?:[ \t]+(?P<value>.*)|[ \t]*)$")

# Leading characters that open YAML constructs beyond flat scalars.
UNSUPPORTED_VALUE_PREFIXES: tuple[str, ...] = ("[", "{", "|", ">", "&", "*", "!", "%", "@", "`")
QUOTE_CHARS: frozenset[str] = frozenset({'"', "'"})

# One line including its terminator. Only CR, LF and CRLF end a line.
DOCUMENT_LINE_PATTERN: Pattern[str] = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")
