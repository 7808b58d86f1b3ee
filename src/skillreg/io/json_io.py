"""Atomic JSON export writes."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from skillreg.constants.reporting import REPORT_TEMP_SUFFIX
from skillreg.types import JsonObject


def write_json_atomic(path: Path, payload: JsonObject) -> None:
    """Write *payload* beside *path*, then rename it into place.

    Readers of *path* see either the previous export or the complete new one,
    and a failed serialization leaves no temporary file behind.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=REPORT_TEMP_SUFFIX)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True, ensure_ascii=False)
            handle.write("\n")
        os.replace(temp_path, path)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise
