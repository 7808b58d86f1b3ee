"""Per-candidate parse and validate stage."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from skillreg.config import RegistryConfig
from skillreg.constants.validation import ISSUE_MALFORMED_METADATA, ISSUE_MISSING_FIELD
from skillreg.exceptions import MalformedMetadataError, SkillValidationError
from skillreg.io import snapshot_file
from skillreg.model import CandidateResult, SkillFolder, ValidationIssue
from skillreg.parsers import decode_skill_markdown, parse_frontmatter, read_skill_markdown
from skillreg.validation import validate_skill_record

logger = logging.getLogger(__name__)


def evaluate_candidate(folder: SkillFolder, config: RegistryConfig) -> CandidateResult:
    """Parse and validate one folder's primary document."""
    document = folder.primary_document
    if document is None:
        issue = ValidationIssue(
            kind=ISSUE_MISSING_FIELD,
            path=str(folder.path),
            field=config.primary_document,
            message=f"missing primary document {config.primary_document}",
        )
        logger.debug("Rejected %s: %s", folder.path, issue.message)
        return CandidateResult(folder=folder, issues=(issue,))

    sha256: str | None = None
    try:
        snapshot = read_skill_markdown(document, max_bytes=config.max_file_bytes)
        sha256 = snapshot.sha256
        parsed = parse_frontmatter(decode_skill_markdown(snapshot, document, max_bytes=config.max_file_bytes))
    except MalformedMetadataError as exc:
        issue = ValidationIssue(kind=ISSUE_MALFORMED_METADATA, path=str(document), message=str(exc))
        logger.debug("Rejected %s: %s", document, exc)
        return CandidateResult(folder=folder, issues=(issue,), sha256=sha256)

    try:
        record = validate_skill_record(
            parsed.metadata,
            parsed.body,
            folder.supporting_files,
            source_path=folder.path,
            document_path=document,
            sha256=sha256,
        )
    except SkillValidationError as exc:
        logger.debug("Rejected %s with %d issue(s)", document, len(exc.issues))
        return CandidateResult(folder=folder, issues=exc.issues, sha256=sha256)

    return CandidateResult(folder=folder, record=record, sha256=sha256)


def evaluate_candidates(
    folders: list[SkillFolder],
    config: RegistryConfig,
    *,
    workers: int = 1,
) -> list[CandidateResult]:
    """Evaluate candidates, optionally on a thread pool; results keep *folders* order."""
    if workers <= 1 or len(folders) <= 1:
        return [evaluate_candidate(folder, config) for folder in folders]

    with ThreadPoolExecutor(max_workers=min(workers, len(folders))) as executor:
        return list(executor.map(lambda folder: evaluate_candidate(folder, config), folders))


def primary_document_digest(folder: SkillFolder) -> str | None:
    """Return the SHA-256 of the folder's primary document, or None when unreadable."""
    if folder.primary_document is None:
        return None
    try:
        return snapshot_file(folder.primary_document, max_bytes=0).sha256
    except OSError as exc:
        logger.debug("Cannot hash %s: %s", folder.primary_document, exc)
        return None
