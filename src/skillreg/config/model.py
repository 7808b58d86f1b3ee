"""Config data model for registry builds."""

from __future__ import annotations

from dataclasses import dataclass

from skillreg.constants.config import DEFAULT_MAX_FILE_KB, DEFAULT_WORKERS
from skillreg.constants.discovery import DEFAULT_SUPPORTING_DOCUMENTS, SCRIPTS_DIRNAME, SKILL_MARKDOWN_FILENAME


@dataclass(frozen=True)
class RegistryConfig:
    """Resolved registry build config."""

    primary_document: str = SKILL_MARKDOWN_FILENAME
    scripts_dir: str = SCRIPTS_DIRNAME
    supporting_documents: tuple[str, ...] = DEFAULT_SUPPORTING_DOCUMENTS
    max_file_kb: int = DEFAULT_MAX_FILE_KB
    workers: int = DEFAULT_WORKERS

    @property
    def max_file_bytes(self) -> int:
        return self.max_file_kb * 1024

    @property
    def supporting_document_names(self) -> frozenset[str]:
        """Lowercased supporting document names for case-insensitive matching."""
        return frozenset(name.lower() for name in self.supporting_documents)
