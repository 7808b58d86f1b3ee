"""Frozen data models shared by the scanner, validator, and reporters."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from skillreg.config.model import RegistryConfig
from skillreg.types import IssueKind, JsonObject


@dataclass(frozen=True)
class SkillFolder:
    """A candidate skill folder discovered directly under the registry root."""

    path: Path
    primary_document: Path | None
    documents: tuple[str, ...] = ()
    scripts: tuple[str, ...] = ()
    extras: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def supporting_files(self) -> frozenset[str]:
        """Relative names of every file found alongside the primary document."""
        return frozenset((*self.documents, *self.scripts, *self.extras))


@dataclass(frozen=True)
class ValidationIssue:
    """A recorded defect that keeps a candidate out of the registry."""

    kind: IssueKind
    path: str
    message: str
    field: str = ""
    hint: str = ""
    related_path: str | None = None

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        parts = [f"[{self.kind}]", self.path, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)

    def to_dict(self) -> JsonObject:
        return {
            "kind": self.kind,
            "path": self.path,
            "message": self.message,
            "field": self.field,
            "hint": self.hint,
            "related_path": self.related_path,
        }


@dataclass(frozen=True)
class SkillRecord:
    """Parsed and validated representation of one skill."""

    name: str
    description: str
    body: str
    supporting_files: frozenset[str]
    source_path: Path
    metadata: Mapping[str, str] = field(default_factory=dict)
    sha256: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_dict(self) -> JsonObject:
        return {
            "name": self.name,
            "description": self.description,
            "body": self.body,
            "supporting_files": sorted(self.supporting_files),
            "source_path": str(self.source_path),
            "metadata": dict(self.metadata),
            "sha256": self.sha256,
        }


@dataclass(frozen=True)
class CandidateResult:
    """Outcome of parsing and validating one folder, before duplicate resolution.

    Exactly one of ``record`` and ``issues`` is populated.
    """

    folder: SkillFolder
    record: SkillRecord | None = None
    issues: tuple[ValidationIssue, ...] = ()
    sha256: str | None = None

    def __post_init__(self) -> None:
        if (self.record is None) == (not self.issues):
            raise ValueError("CandidateResult needs either a record or issues, not both")


@dataclass(frozen=True)
class Registry:
    """Validated, deduplicated skill records plus the audit trail of excluded candidates."""

    root: Path
    records: Mapping[str, SkillRecord]
    issues: tuple[ValidationIssue, ...] = ()
    results: tuple[CandidateResult, ...] = field(default=(), repr=False)
    config: RegistryConfig | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", MappingProxyType(dict(self.records)))

    def __getitem__(self, name: str) -> SkillRecord:
        return self.records[name]

    def __contains__(self, name: object) -> bool:
        return name in self.records

    def __iter__(self) -> Iterator[str]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def get(self, name: str) -> SkillRecord | None:
        return self.records.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self.records)

    @property
    def is_clean(self) -> bool:
        """True when no candidate was excluded."""
        return not self.issues

    def issues_for(self, path: Path | str) -> tuple[ValidationIssue, ...]:
        """Return issues whose offending path is *path* or lies beneath it."""
        target = Path(path).resolve()
        return tuple(issue for issue in self.issues if Path(issue.path) == target or target in Path(issue.path).parents)

    def to_dict(self) -> JsonObject:
        return {
            "root": str(self.root),
            "skills": [record.to_dict() for record in self.records.values()],
            "issues": [issue.to_dict() for issue in self.issues],
        }
