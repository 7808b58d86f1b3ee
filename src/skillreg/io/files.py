"""Single-pass reads of primary documents."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path

from skillreg.constants.io import FILE_HASH_CHUNK_SIZE


@dataclass(frozen=True)
class FileSnapshot:
    """Content and SHA-256 digest of a file taken from one open handle.

    ``data`` is None when the file is larger than the read limit; ``sha256``
    always covers the whole file.
    """

    sha256: str
    size: int
    data: bytes | None = None


def snapshot_file(path: Path, *, max_bytes: int | None = None) -> FileSnapshot:
    """Hash *path* while reading it, keeping the bytes only up to *max_bytes*.

    Pass ``max_bytes=0`` to compute the digest without holding any content.
    """
    digest = hashlib.sha256()
    chunks: list[bytes] = []
    size = 0
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
            size += len(chunk)
            if max_bytes is None or size <= max_bytes:
                chunks.append(chunk)
            elif chunks:
                chunks.clear()

    within_limit = max_bytes is None or size <= max_bytes
    return FileSnapshot(sha256=digest.hexdigest(), size=size, data=b"".join(chunks) if within_limit else None)
