"""Shared file I/O helpers."""

from .files import FileSnapshot, snapshot_file
from .json_io import write_json_atomic

__all__ = ["FileSnapshot", "snapshot_file", "write_json_atomic"]
