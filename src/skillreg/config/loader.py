"""Config loading and normalization for registry builds."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillreg.config.model import RegistryConfig
from skillreg.constants.config import CONFIG_FILENAME
from skillreg.constants.validation import ALLOWED_CONFIG_KEYS
from skillreg.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> RegistryConfig:
    """Load and validate registry config from ``skillreg.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return RegistryConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    defaults = RegistryConfig()
    return RegistryConfig(
        primary_document=_ensure_file_name(raw.get("primary_document", defaults.primary_document), "primary_document"),
        scripts_dir=_ensure_file_name(raw.get("scripts_dir", defaults.scripts_dir), "scripts_dir"),
        supporting_documents=tuple(
            name.strip()
            for name in _ensure_string_list(
                raw.get("supporting_documents", list(defaults.supporting_documents)),
                "supporting_documents",
            )
            if name.strip()
        ),
        max_file_kb=_ensure_positive_int(raw.get("max_file_kb", defaults.max_file_kb), "max_file_kb"),
        workers=_ensure_positive_int(raw.get("workers", defaults.workers), "workers"),
    )


def _ensure_file_name(value: Any, key_name: str) -> str:
    """Require a bare, non-empty file or directory name."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    name = value.strip()
    if "/" in name or "\\" in name or name in {".", ".."}:
        raise ConfigError(f"{key_name} must be a bare name without path separators, got {name!r}")
    return name


def _ensure_positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
