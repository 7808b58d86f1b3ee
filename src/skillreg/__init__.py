"""Skillreg package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import Any

__all__ = ["Registry", "SkillRecord", "ValidationIssue", "__version__", "build_registry", "refresh_registry"]

try:
    __version__ = version("skillreg")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def __getattr__(name: str) -> Any:
    """Lazily expose the public API to avoid import cycles at package import time."""
    if name in {"build_registry", "refresh_registry"}:
        from skillreg.scanner import orchestrator

        return getattr(orchestrator, name)
    if name in {"Registry", "SkillRecord", "ValidationIssue"}:
        from skillreg import model

        return getattr(model, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
