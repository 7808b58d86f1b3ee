"""Preflight checks shared by ``skillreg check`` and ``skillreg validate-config``."""

from __future__ import annotations

from pathlib import Path

from skillreg.config import validate_config_file
from skillreg.constants.validation import CFG010
from skillreg.exceptions import ConfigIssue
from skillreg.exceptions.config import sort_config_issues


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ConfigIssue]:
    """Check the root directory and config file; return issues in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ConfigIssue(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    issues = validate_config_file(root, config_path, config_explicit=config_path is not None)
    return sort_config_issues(issues)
