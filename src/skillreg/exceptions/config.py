"""Configuration-related exceptions and structured config issues."""

from __future__ import annotations

from dataclasses import dataclass

from skillreg.exceptions.base import SkillregError


class ConfigError(SkillregError, ValueError):
    """Raised when the registry root or configuration is invalid."""


@dataclass(frozen=True)
class ConfigIssue:
    """A single config validation problem with stable code and location context."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        parts = [f"[{self.code}]", self.path, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_config_issues(issues: list[ConfigIssue]) -> list[ConfigIssue]:
    """Sort config issues deterministically by code, path, field."""
    return sorted(issues, key=lambda issue: (issue.code, issue.path, issue.field))


def format_config_issues(issues: list[ConfigIssue]) -> str:
    """Format a list of config issues as a multi-line string."""
    return "\n".join(issue.format() for issue in sort_config_issues(issues))
