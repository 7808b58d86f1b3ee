"""Core data models for Skillreg."""

from .entities import CandidateResult, Registry, SkillFolder, SkillRecord, ValidationIssue

__all__ = [
    "CandidateResult",
    "Registry",
    "SkillFolder",
    "SkillRecord",
    "ValidationIssue",
]
