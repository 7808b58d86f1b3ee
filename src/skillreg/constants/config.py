"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillreg.yaml"
DEFAULT_MAX_FILE_KB: int = 512
DEFAULT_WORKERS: int = 1
