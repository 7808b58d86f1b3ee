"""Shared pytest fixtures for building skill folders on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

DEFAULT_BODY: str = "# Sample\n\nFollow these steps.\n"


@pytest.fixture()
def skills_root(tmp_path: Path) -> Path:
    """Return an empty registry root directory."""
    root = tmp_path / "skills"
    root.mkdir()
    return root.resolve()


@pytest.fixture()
def write_skill(skills_root: Path) -> Callable[..., Path]:
    """Return a factory creating ``<root>/<folder>/SKILL.md``.

    Without *content*, a valid document is rendered whose ``name`` defaults to
    the folder name. Passing ``None`` for ``name`` or ``description`` omits
    that key.
    """

    def _write(
        folder: str,
        content: str | None = None,
        *,
        name: str | None = "",
        description: str | None = "Does sample things.",
        body: str = DEFAULT_BODY,
    ) -> Path:
        skill_dir = skills_root / folder
        skill_dir.mkdir(parents=True, exist_ok=True)
        if content is None:
            lines = ["---"]
            if name is not None:
                lines.append(f"name: {name or folder}")
            if description is not None:
                lines.append(f"description: {description}")
            lines.append("---")
            content = "\n".join(lines) + "\n" + body
        (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        return skill_dir

    return _write
