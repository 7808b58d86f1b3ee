"""Skill folder discovery and file classification."""

from __future__ import annotations

import logging
from pathlib import Path

from skillreg.config import RegistryConfig
from skillreg.constants.discovery import HIDDEN_ENTRY_PREFIX
from skillreg.model import SkillFolder

logger = logging.getLogger(__name__)


def discover_skill_folders(root: Path, config: RegistryConfig | None = None) -> list[SkillFolder]:
    """Return candidate skill folders directly under *root*, sorted by folder name.

    Hidden entries and plain files at the root are not candidates. Discovery is
    shallow: only the immediate children of *root* are inspected.
    """
    config = config or RegistryConfig()
    candidates: list[Path] = []
    for entry in root.iterdir():
        if _is_hidden(entry) or not entry.is_dir():
            continue
        candidates.append(entry)

    return [inspect_skill_folder(path, config) for path in sorted(candidates, key=lambda path: path.name)]


def inspect_skill_folder(path: Path, config: RegistryConfig | None = None) -> SkillFolder:
    """Locate the primary document and classify the remaining entries of one folder."""
    config = config or RegistryConfig()
    primary: Path | None = None
    documents: list[str] = []
    scripts: list[str] = []
    extras: list[str] = []

    try:
        entries = sorted(path.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        logger.warning("Cannot list skill folder %s: %s", path, exc)
        entries = []

    for entry in entries:
        if _is_hidden(entry):
            continue
        if entry.is_dir():
            if entry.name == config.scripts_dir:
                scripts.extend(_list_scripts(entry))
            else:
                logger.debug("Not descending into %s", entry)
            continue
        if entry.name == config.primary_document:
            primary = entry
        elif entry.name.lower() in config.supporting_document_names:
            documents.append(entry.name)
        else:
            extras.append(entry.name)

    return SkillFolder(
        path=path,
        primary_document=primary,
        documents=tuple(documents),
        scripts=tuple(scripts),
        extras=tuple(extras),
    )


def _list_scripts(scripts_dir: Path) -> list[str]:
    """Return ``<scripts_dir>/<file>`` names for the files directly inside *scripts_dir*."""
    try:
        entries = sorted(scripts_dir.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        logger.warning("Cannot list scripts directory %s: %s", scripts_dir, exc)
        return []
    return [f"{scripts_dir.name}/{entry.name}" for entry in entries if entry.is_file() and not _is_hidden(entry)]


def _is_hidden(entry: Path) -> bool:
    return entry.name.startswith(HIDDEN_ENTRY_PREFIX)
