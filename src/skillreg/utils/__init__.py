"""Utility helpers for Skillreg."""

from .naming import suggest_skill_name

__all__ = ["suggest_skill_name"]
