"""Constants for file hashing."""

from __future__ import annotations

FILE_HASH_CHUNK_SIZE: int = 65536
