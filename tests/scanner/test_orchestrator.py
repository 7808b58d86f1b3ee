"""Tests for end-to-end registry builds and incremental refresh."""

from __future__ import annotations

import dataclasses
import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

from skillreg import build_registry, refresh_registry
from skillreg.config import RegistryConfig
from skillreg.exceptions import ConfigError
from skillreg.model import Registry


def _snapshot(registry: Registry) -> tuple[tuple[str, ...], list[dict[str, object]], list[dict[str, object]]]:
    return (
        registry.names(),
        [record.to_dict() for record in registry.records.values()],
        [issue.to_dict() for issue in registry.issues],
    )


def test_valid_and_unterminated_folders(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha", '---\nname: alpha\ndescription: "does alpha things"\n---\n# Alpha\nDo alpha.\n')
    beta = write_skill("beta", "---\nname: beta\ndescription: does beta things\n# Beta\n")

    registry = build_registry(skills_root)

    assert registry.names() == ("alpha",)
    assert registry["alpha"].description == "does alpha things"
    assert len(registry.issues) == 1
    (issue,) = registry.issues
    assert issue.kind == "malformed-metadata"
    assert issue.path == str(beta / "SKILL.md")
    assert registry.issues_for(beta) == (issue,)
    assert registry.issues_for(skills_root / "alpha") == ()


def test_well_formed_record_fields(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    skill_dir = write_skill("code-review", body="# Review\n\nCheck the diff.\n")
    (skill_dir / "reference.md").write_text("ref", encoding="utf-8")

    registry = build_registry(skills_root)

    record = registry["code-review"]
    assert record.source_path == skill_dir
    assert record.body == "# Review\n\nCheck the diff.\n"
    assert record.supporting_files == frozenset({"reference.md"})
    assert record.sha256 is not None
    assert registry.is_clean


def test_missing_primary_document_is_reported(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    (skills_root / "drafts").mkdir()

    registry = build_registry(skills_root)

    assert registry.names() == ("alpha",)
    (issue,) = registry.issues
    assert issue.kind == "missing-field"
    assert issue.path == str(skills_root / "drafts")
    assert "SKILL.md" in issue.message


def test_duplicate_names_first_folder_wins(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    first = write_skill("b-first", name="shared")
    second = write_skill("c-second", name="shared")
    write_skill("a-other")

    registry = build_registry(skills_root)

    assert registry.names() == ("a-other", "shared")
    assert registry["shared"].source_path == first
    duplicates = [issue for issue in registry.issues if issue.kind == "duplicate-name"]
    assert len(duplicates) == 1
    assert duplicates[0].path == str(second / "SKILL.md")
    assert duplicates[0].related_path == str(first / "SKILL.md")


def test_invalid_record_does_not_claim_a_name(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("a-broken", name="shared", description="")
    write_skill("b-valid", name="shared")

    registry = build_registry(skills_root)

    assert registry["shared"].source_path == skills_root / "b-valid"
    assert [issue.kind for issue in registry.issues] == ["description-policy-violation"]


def test_reports_every_defect_of_one_document(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("messy", "---\nname: Claude_Helper\n---\n\n")

    registry = build_registry(skills_root)

    assert len(registry) == 0
    kinds = sorted(issue.kind for issue in registry.issues)
    assert kinds == ["missing-field", "missing-field", "name-policy-violation", "name-policy-violation"]


def test_build_is_idempotent(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    write_skill("beta", name="Beta")
    write_skill("gamma", name="alpha")

    assert _snapshot(build_registry(skills_root)) == _snapshot(build_registry(skills_root))


def test_parallel_build_matches_sequential(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    for index in range(12):
        write_skill(f"skill-{index:02d}", name="dup" if index % 4 == 0 else "")
    write_skill("zz-broken", "no metadata here\n")

    sequential = build_registry(skills_root, workers=1)
    parallel = build_registry(skills_root, workers=4)

    assert _snapshot(parallel) == _snapshot(sequential)
    assert parallel["dup"].source_path == skills_root / "skill-00"


def test_registry_is_read_only(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    registry = build_registry(skills_root)

    with pytest.raises(TypeError):
        registry.records["beta"] = registry["alpha"]  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        registry.issues = ()  # type: ignore[misc]


def test_record_metadata_is_read_only(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha", "---\nname: alpha\ndescription: a\nlicense: MIT\n---\nbody\n")
    registry = build_registry(skills_root)

    with pytest.raises(TypeError):
        registry["alpha"].metadata["name"] = "hacked"  # type: ignore[index]

    assert registry["alpha"].metadata["name"] == "alpha"
    assert registry["alpha"].to_dict()["metadata"] == {"name": "alpha", "description": "a", "license": "MIT"}


def test_missing_root_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        build_registry(tmp_path / "nope")


def test_config_file_is_applied(skills_root: Path) -> None:
    (skills_root / "skillreg.yaml").write_text("primary_document: INSTRUCTIONS.md\n", encoding="utf-8")
    skill_dir = skills_root / "alpha"
    skill_dir.mkdir()
    (skill_dir / "INSTRUCTIONS.md").write_text("---\nname: alpha\ndescription: a\n---\nbody\n", encoding="utf-8")

    registry = build_registry(skills_root)

    assert registry.names() == ("alpha",)


def test_invalid_config_file_raises(skills_root: Path) -> None:
    (skills_root / "skillreg.yaml").write_text("workers: 0\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="workers"):
        build_registry(skills_root)


def test_undecodable_config_file_raises(skills_root: Path) -> None:
    (skills_root / "skillreg.yaml").write_bytes(b"workers: \xff\n")

    with pytest.raises(ConfigError, match="Cannot read config file"):
        build_registry(skills_root)


def test_explicit_config_overrides_file(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")

    registry = build_registry(skills_root, config=RegistryConfig(primary_document="MISSING.md"))

    assert len(registry) == 0
    assert registry.issues[0].kind == "missing-field"


def test_refresh_picks_up_changes(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    write_skill("beta", "---\nname: beta\n")
    write_skill("gamma")
    registry = build_registry(skills_root)
    assert registry.names() == ("alpha", "gamma")

    write_skill("beta", description="Fixed now.")
    shutil.rmtree(skills_root / "gamma")
    write_skill("delta")

    refreshed = refresh_registry(registry)

    assert refreshed.names() == ("alpha", "beta", "delta")
    assert refreshed.is_clean
    assert _snapshot(refreshed) == _snapshot(build_registry(skills_root))
    assert registry.names() == ("alpha", "gamma")


def test_refresh_reuses_unchanged_results(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    write_skill("beta")
    registry = build_registry(skills_root)

    refreshed = refresh_registry(registry)

    assert refreshed["alpha"] is registry["alpha"]
    assert refreshed["beta"] is registry["beta"]


def test_refresh_named_folders_only(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    write_skill("beta")
    registry = build_registry(skills_root)

    write_skill("alpha", description="Changed alpha.")
    write_skill("beta", description="Changed beta.")
    refreshed = refresh_registry(registry, ["beta"])

    assert refreshed["alpha"].description == "Does sample things."
    assert refreshed["beta"].description == "Changed beta."


def test_refresh_named_folder_can_create_duplicate(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    write_skill("beta")
    registry = build_registry(skills_root)

    write_skill("beta", name="alpha")
    refreshed = refresh_registry(registry, [skills_root / "beta"])

    assert refreshed.names() == ("alpha",)
    assert [issue.kind for issue in refreshed.issues] == ["duplicate-name"]


def test_refresh_named_folder_removed_from_disk(skills_root: Path, write_skill: Callable[..., Path]) -> None:
    write_skill("alpha")
    write_skill("beta")
    registry = build_registry(skills_root)

    shutil.rmtree(skills_root / "alpha")
    refreshed = refresh_registry(registry, ["alpha"])

    assert refreshed.names() == ("beta",)
