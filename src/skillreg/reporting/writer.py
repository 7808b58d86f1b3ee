"""JSON export of a built registry."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from skillreg.constants.reporting import SCHEMA_VERSION
from skillreg.constants.validation import ALL_ISSUE_KINDS
from skillreg.io import write_json_atomic
from skillreg.model import Registry, ValidationIssue
from skillreg.types import JsonObject


def issue_kind_counts(issues: tuple[ValidationIssue, ...]) -> dict[str, int]:
    """Count issues per kind, including zero entries for every known kind."""
    counts = Counter(issue.kind for issue in issues)
    return {kind: counts.get(kind, 0) for kind in ALL_ISSUE_KINDS}


def build_registry_payload(registry: Registry) -> JsonObject:
    """Return the JSON-serializable export document for *registry*."""
    payload = registry.to_dict()
    payload["schema_version"] = SCHEMA_VERSION
    payload["summary"] = {
        "folders": len(registry.results),
        "skills": len(registry),
        "issues": len(registry.issues),
        "counts_by_kind": issue_kind_counts(registry.issues),
    }
    return payload


def write_registry_report(path: Path, registry: Registry) -> None:
    """Write the registry export to *path* atomically."""
    write_json_atomic(path, build_registry_payload(registry))
