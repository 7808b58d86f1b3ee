"""Skill record validation failure."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skillreg.exceptions.base import SkillregError

if TYPE_CHECKING:
    from skillreg.model import ValidationIssue


class SkillValidationError(SkillregError, ValueError):
    """Raised when a parsed skill breaks one or more record rules.

    ``issues`` always holds at least one entry.
    """

    def __init__(self, issues: tuple[ValidationIssue, ...]) -> None:
        if not issues:
            raise ValueError("SkillValidationError requires at least one issue")
        super().__init__("; ".join(issue.message for issue in issues))
        self.issues = issues
