"""Restricted key/value grammar for the metadata block at the top of a skill document.

Only flat scalar values are accepted. Quoted scalars are decoded with YAML
quoting rules; anything that would open a nested structure is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import yaml

from skillreg.constants.parsing import (
    BYTE_ORDER_MARK,
    COMMENT_PREFIX,
    DOCUMENT_LINE_PATTERN,
    FRONTMATTER_DELIMITER,
    METADATA_LINE_PATTERN,
    QUOTE_CHARS,
    UNSUPPORTED_VALUE_PREFIXES,
)
from skillreg.exceptions import MalformedMetadataError


@dataclass(frozen=True)
class ParsedDocument:
    """Metadata mapping plus the body text that follows the closing delimiter."""

    metadata: dict[str, str] = field(default_factory=dict)
    body: str = ""
    body_start_line: int = 1


def parse_frontmatter(text: str) -> ParsedDocument:
    """Split *text* into its metadata mapping and body.

    Raises:
        MalformedMetadataError: The opening delimiter is not the first non-blank
            line, the closing delimiter is missing, or a block line is not a
            flat ``key: value`` pair.
    """
    lines = DOCUMENT_LINE_PATTERN.findall(text.lstrip(BYTE_ORDER_MARK))

    opening = _first_non_blank(lines)
    if opening is None or lines[opening].strip() != FRONTMATTER_DELIMITER:
        raise MalformedMetadataError(
            "metadata block must open with '---' on the first non-blank line",
            line=None if opening is None else opening + 1,
        )

    closing = _find_closing_delimiter(lines, opening + 1)
    if closing is None:
        raise MalformedMetadataError("metadata block is not terminated by a closing '---' line", line=opening + 1)

    metadata: dict[str, str] = {}
    for index in range(opening + 1, closing):
        line = lines[index]
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        key, value = _parse_metadata_line(line, line_number=index + 1)
        if key in metadata:
            raise MalformedMetadataError(f"line {index + 1}: duplicate metadata key `{key}`", line=index + 1)
        metadata[key] = value

    return ParsedDocument(
        metadata=metadata,
        body="".join(lines[closing + 1 :]),
        body_start_line=closing + 2,
    )


def _first_non_blank(lines: list[str]) -> int | None:
    for index, line in enumerate(lines):
        if line.strip():
            return index
    return None


def _find_closing_delimiter(lines: list[str], start: int) -> int | None:
    for index in range(start, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            return index
    return None


def _parse_metadata_line(line: str, *, line_number: int) -> tuple[str, str]:
    match = METADATA_LINE_PATTERN.match(line.rstrip())
    if match is None:
        raise MalformedMetadataError(
            f"line {line_number}: expected a flat `key: value` pair, got {line.strip()!r}",
            line=line_number,
        )
    key = match.group("key")
    raw_value = (match.group("value") or "").strip()
    return key, _parse_scalar(raw_value, key=key, line_number=line_number)


def _parse_scalar(raw_value: str, *, key: str, line_number: int) -> str:
    if not raw_value:
        return ""
    if raw_value[0] in QUOTE_CHARS:
        return _decode_quoted(raw_value, key=key, line_number=line_number)
    if raw_value.startswith(UNSUPPORTED_VALUE_PREFIXES):
        raise MalformedMetadataError(
            f"line {line_number}: value for `{key}` must be a plain or quoted scalar",
            line=line_number,
        )
    if " #" in raw_value:
        raw_value = raw_value.split(" #", 1)[0].rstrip()
    return raw_value


def _decode_quoted(raw_value: str, *, key: str, line_number: int) -> str:
    try:
        decoded = yaml.safe_load(raw_value)
    except yaml.YAMLError as exc:
        raise MalformedMetadataError(
            f"line {line_number}: unbalanced quotes in value for `{key}`",
            line=line_number,
        ) from exc
    if not isinstance(decoded, str):
        raise MalformedMetadataError(
            f"line {line_number}: value for `{key}` must be a single quoted string",
            line=line_number,
        )
    return decoded
