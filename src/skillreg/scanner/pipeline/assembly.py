"""Single-threaded reduction of candidate results into a Registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skillreg.config import RegistryConfig
from skillreg.constants.policy import NAME_KEY
from skillreg.constants.validation import ISSUE_DUPLICATE_NAME
from skillreg.model import CandidateResult, Registry, SkillRecord, ValidationIssue

logger = logging.getLogger(__name__)


def assemble_registry(
    root: Path,
    results: Iterable[CandidateResult],
    *,
    config: RegistryConfig | None = None,
) -> Registry:
    """Fold ordered candidate results into a Registry.

    The first accepted record claims its name; later records with the same
    name are rejected with a ``duplicate-name`` issue naming both sources.
    """
    ordered = tuple(results)
    records: dict[str, SkillRecord] = {}
    claimed_by: dict[str, str] = {}
    issues: list[ValidationIssue] = []

    for result in ordered:
        if result.record is None:
            issues.extend(result.issues)
            continue

        record = result.record
        document = str(result.folder.primary_document or record.source_path)
        first = claimed_by.get(record.name)
        if first is not None:
            logger.warning("Duplicate skill name '%s' in %s; keeping %s", record.name, document, first)
            issues.append(
                ValidationIssue(
                    kind=ISSUE_DUPLICATE_NAME,
                    path=document,
                    field=NAME_KEY,
                    message=f"skill name `{record.name}` is already claimed by {first}",
                    related_path=first,
                )
            )
            continue

        records[record.name] = record
        claimed_by[record.name] = document

    return Registry(root=root, records=records, issues=tuple(issues), results=ordered, config=config)
