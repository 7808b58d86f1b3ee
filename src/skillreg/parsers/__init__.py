"""Parsers for skill primary documents."""

from __future__ import annotations

from .frontmatter import ParsedDocument, parse_frontmatter
from .skill_markdown import decode_skill_markdown, parse_skill_markdown_file, read_skill_markdown

__all__ = [
    "ParsedDocument",
    "decode_skill_markdown",
    "parse_frontmatter",
    "parse_skill_markdown_file",
    "read_skill_markdown",
]
