"""Configuration loading and validation for registry builds."""

from __future__ import annotations

from skillreg.config.loader import load_config
from skillreg.config.model import RegistryConfig
from skillreg.config.validator import suggest_key, validate_config_file

__all__ = [
    "RegistryConfig",
    "load_config",
    "suggest_key",
    "validate_config_file",
]
