"""Root of the Skillreg exception hierarchy."""

from __future__ import annotations


class SkillregError(Exception):
    """Base class for all Skillreg errors."""
