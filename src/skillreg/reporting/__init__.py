"""Reporting package for registry outputs."""

from __future__ import annotations

from .stdout import StdoutReporter
from .writer import build_registry_payload, issue_kind_counts, write_registry_report

__all__ = ["StdoutReporter", "build_registry_payload", "issue_kind_counts", "write_registry_report"]
