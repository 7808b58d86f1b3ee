"""Collect-all validation for ``skillreg.yaml``."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from skillreg.constants.config import CONFIG_FILENAME
from skillreg.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG007,
    LIST_OF_STRINGS_KEYS,
    POSITIVE_INT_KEYS,
    STRING_KEYS,
)
from skillreg.exceptions import ConfigIssue


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ConfigIssue]:
    """Validate a skillreg.yaml file and return every problem found.

    Used by both ``skillreg validate-config`` and the ``skillreg check``
    preflight. It never raises; all problems are returned as
    :class:`ConfigIssue` instances.
    """
    issues: list[ConfigIssue] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            issues.append(ConfigIssue(code=CFG001, path=path_str, field="", message=f"config file not found: {path}"))
        return issues

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        issues.append(ConfigIssue(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return issues
    except (OSError, UnicodeDecodeError) as exc:
        issues.append(ConfigIssue(code=CFG002, path=path_str, field="", message=f"cannot read config file: {exc}"))
        return issues

    if raw is None:
        return issues

    if not isinstance(raw, dict):
        issues.append(
            ConfigIssue(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return issues

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            issues.append(
                ConfigIssue(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in STRING_KEYS:
        if key in raw:
            val = raw[key]
            if not isinstance(val, str) or not val.strip():
                issues.append(_type_issue(path_str, key, "expected a non-empty string"))
            elif "/" in val or "\\" in val or val.strip() in {".", ".."}:
                issues.append(
                    ConfigIssue(
                        code=CFG007,
                        path=path_str,
                        field=key,
                        message=f"`{key}` must be a bare name without path separators, got {val!r}",
                    )
                )

    for key in POSITIVE_INT_KEYS:
        if key in raw:
            val = raw[key]
            if isinstance(val, bool) or not isinstance(val, int):
                issues.append(_type_issue(path_str, key, "expected a positive integer"))
            elif val <= 0:
                issues.append(
                    ConfigIssue(
                        code=CFG007,
                        path=path_str,
                        field=key,
                        message=f"`{key}` must be a positive integer, got {val}",
                    )
                )

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            val = raw[key]
            if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
                issues.append(_type_issue(path_str, key, "expected a list of strings"))

    return issues


def suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for an unknown key, or empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _type_issue(path_str: str, key: str, hint: str) -> ConfigIssue:
    return ConfigIssue(code=CFG005, path=path_str, field=key, message=f"invalid type for `{key}`", hint=hint)
