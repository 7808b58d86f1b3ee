"""Human-readable stdout reporter for registry builds."""

from __future__ import annotations

from pathlib import Path

from skillreg.constants.branding import ASCII_LOGO_LINES, CHECK_SUMMARY_TITLE
from skillreg.constants.reporting import (
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    DESCRIPTION_PREVIEW_LENGTH,
    ISSUE_KIND_COLORS,
)
from skillreg.model import Registry, ValidationIssue
from skillreg.reporting.writer import issue_kind_counts


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _preview(text: str) -> str:
    flattened = " ".join(text.split())
    if len(flattened) <= DESCRIPTION_PREVIEW_LENGTH:
        return flattened
    return flattened[: DESCRIPTION_PREVIEW_LENGTH - 3].rstrip() + "..."


class StdoutReporter:
    """Formats a registry and its issues for the terminal."""

    def __init__(self, registry: Registry, *, color: bool = True, verbose: bool = False) -> None:
        self._registry = registry
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_skills(), self._render_issues()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._registry
        sep = "  " + "─" * 38
        status = "clean" if r.is_clean else f"{len(r.issues)} issue(s)"
        if self._color:
            status = _colorize(status, ANSI_GREEN if r.is_clean else ANSI_RED)

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {CHECK_SUMMARY_TITLE}",
            sep,
            "",
            f"  Root        {r.root}",
            f"  Folders     {len(r.results)} scanned / {len(r)} accepted",
            f"  Status      {status}",
        ]
        counts = {kind: count for kind, count in issue_kind_counts(r.issues).items() if count}
        if counts:
            breakdown = ", ".join(f"{kind}={count}" for kind, count in counts.items())
            lines.append(f"  Issues      {breakdown}")
        lines.append("")
        return "\n".join(lines)

    def _render_skills(self) -> str:
        if not self._verbose or not len(self._registry):
            return ""
        width = max(len(name) for name in self._registry)
        lines = ["  Skills"]
        for name, record in self._registry.records.items():
            extra = f"  [{len(record.supporting_files)} file(s)]" if record.supporting_files else ""
            lines.append(f"    {name.ljust(width)}  {_preview(record.description)}{extra}")
        lines.append("")
        return "\n".join(lines)

    def _render_issues(self) -> str:
        if self._registry.is_clean:
            return ""
        lines = ["  Issues"]
        lines.extend(f"    {self._format_issue(issue)}" for issue in self._registry.issues)
        lines.append("")
        return "\n".join(lines)

    def _format_issue(self, issue: ValidationIssue) -> str:
        kind = f"[{issue.kind}]"
        if self._color:
            kind = _colorize(kind, ISSUE_KIND_COLORS.get(issue.kind, ""))
        location = self._relative(issue.path)
        text = f"{kind} {location}: {issue.message}"
        if issue.hint:
            hint = f"({issue.hint})"
            text = f"{text} {_colorize(hint, ANSI_DIM) if self._color else hint}"
        return text

    def _relative(self, path: str) -> str:
        try:
            return Path(path).relative_to(self._registry.root).as_posix()
        except ValueError:
            return path
