"""Parsing-related exceptions."""

from __future__ import annotations

from skillreg.exceptions.base import SkillregError


class SkillParseError(SkillregError, ValueError):
    """Raised when a SKILL.md file cannot be parsed."""


class MalformedMetadataError(SkillParseError):
    """Raised when the metadata block is missing, unterminated, or holds an unparsable line."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line
