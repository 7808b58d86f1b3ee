"""Tests for the stdout reporter."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from skillreg import build_registry
from skillreg.constants.reporting import ANSI_GREEN, ANSI_RED, ANSI_RESET
from skillreg.reporting import StdoutReporter


def test_clean_registry_header(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    write_skill("beta")

    output = StdoutReporter(build_registry(skills_root), color=False).render()

    assert "Registry summary" in output
    assert "Folders     2 scanned / 2 accepted" in output
    assert "Status      clean" in output
    assert "Issues" not in output


def test_issues_listed_relative_to_root(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    write_skill("Bad", name="Bad_Name")

    output = StdoutReporter(build_registry(skills_root), color=False).render()

    assert "Status      1 issue(s)" in output
    assert "Issues      name-policy-violation=1" in output
    assert "[name-policy-violation] Bad/SKILL.md:" in output
    assert "(try `bad-name`)" in output


def test_verbose_lists_skills(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha", description="x" * 200)
    write_skill("beta")

    quiet = StdoutReporter(build_registry(skills_root), color=False).render()
    verbose = StdoutReporter(build_registry(skills_root), color=False, verbose=True).render()

    assert "  Skills" not in quiet
    assert "  Skills" in verbose
    assert "alpha  " + "x" * 69 + "..." in verbose
    assert "beta   Does sample things." in verbose


def test_color_status(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    clean = StdoutReporter(build_registry(skills_root), color=True).render()
    assert f"{ANSI_GREEN}clean{ANSI_RESET}" in clean

    (skills_root / "empty").mkdir()
    dirty = StdoutReporter(build_registry(skills_root), color=True).render()
    assert f"{ANSI_RED}1 issue(s){ANSI_RESET}" in dirty
