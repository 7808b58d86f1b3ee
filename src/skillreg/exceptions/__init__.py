"""Shared exception hierarchy for Skillreg."""

from __future__ import annotations

from .base import SkillregError
from .config import ConfigError, ConfigIssue
from .parsing import MalformedMetadataError, SkillParseError
from .validation import SkillValidationError

__all__ = [
    "ConfigError",
    "ConfigIssue",
    "MalformedMetadataError",
    "SkillParseError",
    "SkillValidationError",
    "SkillregError",
]
