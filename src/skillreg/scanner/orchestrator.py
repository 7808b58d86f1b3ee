"""End-to-end registry builds.

``build_registry`` is the primary entry point; ``refresh_registry`` applies an
explicit incremental update to a previously built registry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skillreg.config import RegistryConfig, load_config
from skillreg.exceptions import ConfigError
from skillreg.model import CandidateResult, Registry, SkillFolder
from skillreg.scanner.discovery import discover_skill_folders
from skillreg.scanner.pipeline.assembly import assemble_registry
from skillreg.scanner.pipeline.evaluation import evaluate_candidate, evaluate_candidates, primary_document_digest

logger = logging.getLogger(__name__)


def build_registry(
    root: Path | str,
    *,
    config: RegistryConfig | None = None,
    config_path: Path | None = None,
    workers: int | None = None,
) -> Registry:
    """Scan *root* and return the registry of valid skills plus every issue found.

    Candidate problems never abort the build; they are reported on
    ``Registry.issues``.

    Raises:
        ConfigError: *root* is not a directory or the config file is invalid.
    """
    resolved_root = _resolve_root(root)
    if config is None:
        config = load_config(resolved_root, config_path)
    resolved_workers = workers if workers is not None else config.workers

    folders = discover_skill_folders(resolved_root, config)
    results = evaluate_candidates(folders, config, workers=resolved_workers)
    registry = assemble_registry(resolved_root, results, config=config)
    logger.info(
        "Built registry from %s: %d skill(s) accepted, %d issue(s) across %d folder(s)",
        resolved_root,
        len(registry),
        len(registry.issues),
        len(folders),
    )
    return registry


def refresh_registry(
    registry: Registry,
    folders: Iterable[Path | str] | None = None,
    *,
    workers: int | None = None,
) -> Registry:
    """Return a new registry with changed candidates re-evaluated.

    With *folders*, exactly those folders (absolute, or relative to the
    registry root) are re-evaluated, added, or dropped when gone from disk;
    every other candidate keeps its previous result. Without *folders*, the
    root is rescanned and a folder is re-evaluated when it is new, its file
    listing changed, or its primary document's SHA-256 changed.
    """
    config = registry.config or RegistryConfig()
    root = registry.root
    previous = {result.folder.path: result for result in registry.results}

    if folders is None:
        current = discover_skill_folders(root, config)
        stale = [folder for folder in current if _needs_evaluation(folder, previous.get(folder.path))]
        kept = {folder.path: previous[folder.path] for folder in current if folder not in stale}
    else:
        targets = {_resolve_folder(root, folder) for folder in folders}
        kept = {path: result for path, result in previous.items() if path not in targets}
        present = {folder.path: folder for folder in discover_skill_folders(root, config)}
        stale = [present[path] for path in sorted(targets, key=lambda path: path.name) if path in present]

    resolved_workers = workers if workers is not None else config.workers
    refreshed = evaluate_candidates(stale, config, workers=resolved_workers)
    merged = {**kept, **{result.folder.path: result for result in refreshed}}
    ordered = [merged[path] for path in sorted(merged, key=lambda path: path.name)]

    updated = assemble_registry(root, ordered, config=config)
    logger.info("Refreshed registry at %s: %d folder(s) re-evaluated", root, len(stale))
    return updated


def _needs_evaluation(folder: SkillFolder, previous: CandidateResult | None) -> bool:
    if previous is None or previous.folder != folder:
        return True
    return primary_document_digest(folder) != previous.sha256


def _resolve_root(root: Path | str) -> Path:
    resolved = Path(root).resolve()
    if not resolved.is_dir():
        raise ConfigError(f"Registry root does not exist or is not a directory: {resolved}")
    return resolved


def _resolve_folder(root: Path, folder: Path | str) -> Path:
    path = Path(folder)
    if not path.is_absolute():
        path = root / path
    return path.parent.resolve() / path.name
