"""Shared type aliases for Skillreg."""

from .common import IssueKind, JsonObject, JsonScalar, JsonValue

__all__ = [
    "IssueKind",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
