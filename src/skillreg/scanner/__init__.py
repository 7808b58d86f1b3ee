"""Registry build orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["build_registry", "discover_skill_folders", "refresh_registry"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name in {"build_registry", "refresh_registry"}:
        from . import orchestrator

        return getattr(orchestrator, name)
    if name == "discover_skill_folders":
        from .discovery import discover_skill_folders

        return discover_skill_folders
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
