"""Skill record validation.

Every rule is checked independently so one pass reports every defect in a
document instead of stopping at the first.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from skillreg.constants.policy import (
    DESCRIPTION_KEY,
    DESCRIPTION_MAX_LENGTH,
    NAME_KEY,
    NAME_MAX_LENGTH,
    NAME_PATTERN,
    RESERVED_NAME_TOKENS,
)
from skillreg.constants.validation import (
    ISSUE_DESCRIPTION_POLICY,
    ISSUE_MISSING_FIELD,
    ISSUE_NAME_POLICY,
)
from skillreg.exceptions import SkillValidationError
from skillreg.model import SkillRecord, ValidationIssue
from skillreg.utils import suggest_skill_name


def validate_skill_record(
    metadata: Mapping[str, str],
    body: str,
    supporting_files: Iterable[str],
    *,
    source_path: Path,
    document_path: Path | None = None,
    sha256: str | None = None,
) -> SkillRecord:
    """Build a SkillRecord from parsed document parts.

    Raises:
        SkillValidationError: One or more rules failed; ``issues`` lists all of them.
    """
    issues = collect_record_issues(metadata, body, path=document_path or source_path)
    if issues:
        raise SkillValidationError(tuple(issues))

    return SkillRecord(
        name=metadata[NAME_KEY],
        description=metadata[DESCRIPTION_KEY],
        body=body,
        supporting_files=frozenset(supporting_files),
        source_path=source_path,
        metadata=dict(metadata),
        sha256=sha256,
    )


def collect_record_issues(metadata: Mapping[str, str], body: str, *, path: Path) -> list[ValidationIssue]:
    """Return every rule violation for a parsed document; empty when valid."""
    path_str = str(path)
    issues: list[ValidationIssue] = []
    issues.extend(_check_name(metadata, path_str))
    issues.extend(_check_description(metadata, path_str))
    if not body.strip():
        issues.append(
            ValidationIssue(
                kind=ISSUE_MISSING_FIELD,
                path=path_str,
                field="body",
                message="instruction body after the metadata block is empty",
            )
        )
    return issues


def _check_name(metadata: Mapping[str, str], path_str: str) -> list[ValidationIssue]:
    if NAME_KEY not in metadata:
        return [_missing_key(NAME_KEY, path_str)]

    name = metadata[NAME_KEY]
    if not name:
        return [_name_issue(path_str, "`name` is empty")]

    issues: list[ValidationIssue] = []
    hint = f"try `{suggest_skill_name(name)}`"
    if len(name) > NAME_MAX_LENGTH:
        issues.append(_name_issue(path_str, f"`name` is {len(name)} characters, limit is {NAME_MAX_LENGTH}", hint))
    if NAME_PATTERN.fullmatch(name) is None:
        issues.append(
            _name_issue(path_str, f"`name` {name!r} may only contain lowercase letters, digits, and hyphens", hint)
        )
    lowered = name.lower()
    for token in RESERVED_NAME_TOKENS:
        if token in lowered:
            issues.append(_name_issue(path_str, f"`name` {name!r} contains the reserved word `{token}`", hint))
    return issues


def _check_description(metadata: Mapping[str, str], path_str: str) -> list[ValidationIssue]:
    if DESCRIPTION_KEY not in metadata:
        return [_missing_key(DESCRIPTION_KEY, path_str)]

    description = metadata[DESCRIPTION_KEY]
    if not description.strip():
        return [_description_issue(path_str, "`description` is empty")]
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return [
            _description_issue(
                path_str,
                f"`description` is {len(description)} characters, limit is {DESCRIPTION_MAX_LENGTH}",
            )
        ]
    return []


def _missing_key(key: str, path_str: str) -> ValidationIssue:
    return ValidationIssue(
        kind=ISSUE_MISSING_FIELD,
        path=path_str,
        field=key,
        message=f"required metadata key `{key}` is missing",
    )


def _name_issue(path_str: str, message: str, hint: str = "") -> ValidationIssue:
    return ValidationIssue(kind=ISSUE_NAME_POLICY, path=path_str, field=NAME_KEY, message=message, hint=hint)


def _description_issue(path_str: str, message: str) -> ValidationIssue:
    return ValidationIssue(kind=ISSUE_DESCRIPTION_POLICY, path=path_str, field=DESCRIPTION_KEY, message=message)
