"""Reader for SKILL.md primary documents."""

from __future__ import annotations

from pathlib import Path

from skillreg.exceptions import MalformedMetadataError
from skillreg.io import FileSnapshot, snapshot_file
from skillreg.parsers.frontmatter import ParsedDocument, parse_frontmatter


def read_skill_markdown(path: Path, *, max_bytes: int | None = None) -> FileSnapshot:
    """Read and hash a primary document in one pass."""
    try:
        return snapshot_file(path, max_bytes=max_bytes)
    except OSError as exc:
        raise MalformedMetadataError(f"cannot read {path.name}: {exc.strerror or exc}") from exc


def decode_skill_markdown(snapshot: FileSnapshot, path: Path, *, max_bytes: int | None = None) -> str:
    """Return the snapshot as UTF-8 text, rejecting oversize or undecodable content."""
    if snapshot.data is None:
        limit_kb = (max_bytes or 0) // 1024
        raise MalformedMetadataError(
            f"{path.name} ({snapshot.size} bytes) exceeds the {limit_kb} KB document size limit"
        )
    try:
        return snapshot.data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedMetadataError(f"{path.name} is not valid UTF-8 text: {exc.reason}") from exc


def parse_skill_markdown_file(path: Path, *, max_bytes: int | None = None) -> ParsedDocument:
    """Parse a SKILL.md file into its metadata mapping and body."""
    snapshot = read_skill_markdown(path, max_bytes=max_bytes)
    return parse_frontmatter(decode_skill_markdown(snapshot, path, max_bytes=max_bytes))
