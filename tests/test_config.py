"""Tests for configuration loading, validation, and preflight."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillreg.config import RegistryConfig, load_config, suggest_key, validate_config_file
from skillreg.constants.discovery import DEFAULT_SUPPORTING_DOCUMENTS
from skillreg.exceptions import ConfigError
from skillreg.exceptions.config import format_config_issues
from skillreg.preflight import preflight_validate


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == RegistryConfig()
    assert loaded.primary_document == "SKILL.md"
    assert loaded.supporting_documents == DEFAULT_SUPPORTING_DOCUMENTS
    assert loaded.max_file_bytes == loaded.max_file_kb * 1024


def test_load_config_reads_values(tmp_path: Path) -> None:
    (tmp_path / "skillreg.yaml").write_text(
        "\n".join(
            [
                "primary_document: INSTRUCTIONS.md",
                "scripts_dir: bin",
                "supporting_documents: [GUIDE.md, ' faq.md ', '']",
                "max_file_kb: 64",
                "workers: 4",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded.primary_document == "INSTRUCTIONS.md"
    assert loaded.scripts_dir == "bin"
    assert loaded.supporting_documents == ("GUIDE.md", "faq.md")
    assert loaded.supporting_document_names == frozenset({"guide.md", "faq.md"})
    assert loaded.max_file_kb == 64
    assert loaded.workers == 4


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "skillreg.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == RegistryConfig()


def test_load_config_explicit_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "custom.yaml")


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("max_file_kb: true\n", "max_file_kb"),
        ("max_file_kb: -1\n", "max_file_kb"),
        ("workers: two\n", "workers"),
        ("primary_document: docs/SKILL.md\n", "primary_document"),
        ("scripts_dir: ''\n", "scripts_dir"),
        ("supporting_documents: 123\n", "supporting_documents"),
        ("primary_doc: SKILL.md\n", "primary_doc"),
        ("- a\n- b\n", "mapping"),
        ("workers: [\n", "Invalid YAML"),
    ],
    ids=["bool-int", "negative-int", "str-int", "path-name", "empty-name", "not-list", "unknown-key", "list", "bad-yaml"],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    (tmp_path / "skillreg.yaml").write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path)


def test_validate_config_collects_all_issues(tmp_path: Path) -> None:
    config_path = tmp_path / "skillreg.yaml"
    config_path.write_text(
        "workers: 0\nmax_file_kb: big\nprimary_documnet: SKILL.md\nsupporting_documents: nope\n",
        encoding="utf-8",
    )

    issues = validate_config_file(tmp_path)

    codes = sorted(issue.code for issue in issues)
    assert codes == ["CFG004", "CFG005", "CFG005", "CFG007"]
    unknown = next(issue for issue in issues if issue.code == "CFG004")
    assert unknown.hint == "did you mean `primary_document`?"


def test_validate_config_missing_explicit_file(tmp_path: Path) -> None:
    issues = validate_config_file(tmp_path, tmp_path / "absent.yaml", config_explicit=True)

    assert [issue.code for issue in issues] == ["CFG001"]


def test_validate_config_non_mapping(tmp_path: Path) -> None:
    (tmp_path / "skillreg.yaml").write_text("just a string\n", encoding="utf-8")

    assert [issue.code for issue in validate_config_file(tmp_path)] == ["CFG003"]


def test_suggest_key_without_match_is_empty() -> None:
    assert suggest_key("zzz", frozenset({"workers"})) == ""


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    issues = preflight_validate(tmp_path / "missing")

    assert [issue.code for issue in issues] == ["CFG010"]


def test_preflight_sorted_and_formatted(tmp_path: Path) -> None:
    (tmp_path / "skillreg.yaml").write_text("workers: -3\nbogus: 1\n", encoding="utf-8")

    issues = preflight_validate(tmp_path)

    assert [issue.code for issue in issues] == ["CFG004", "CFG007"]
    rendered = format_config_issues(issues)
    assert rendered.splitlines()[0].startswith("[CFG004]")
    assert "unknown key `bogus`" in rendered


def test_load_config_unreadable_file_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / "skillreg.yaml").write_bytes(b"workers: \xff\n")

    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path)


def test_load_config_directory_path_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / "skillreg.yaml").mkdir()

    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path)


@pytest.mark.parametrize("as_directory", [False, True], ids=["invalid-utf8", "directory"])
def test_validate_config_unreadable_file(tmp_path: Path, as_directory: bool) -> None:
    config_path = tmp_path / "skillreg.yaml"
    if as_directory:
        config_path.mkdir()
    else:
        config_path.write_bytes(b"workers: \xff\n")

    issues = validate_config_file(tmp_path)

    assert [issue.code for issue in issues] == ["CFG002"]
    assert "cannot read config file" in issues[0].message
