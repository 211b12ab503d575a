"""
Whole-file JSON snapshots.

Every mutation rewrites the full document. Writes go to a temp file in the
same directory and are then renamed over the target, so a crash mid-write
leaves the previous snapshot intact.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from wordbank.errors import SnapshotError

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any | None:
    """Load a snapshot. Returns None if the file does not exist."""
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SnapshotError(f"{path} is not valid UTF-8 JSON: {e}") from e


def write_json_atomic(path: Path, data: Any) -> None:
    """Replace `path` with `data` serialized as JSON.

    Raises OSError on failure; callers decide how to report it.
    """
    directory = path.parent
    directory.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        # Leave no stray temp file behind; the original snapshot is untouched.
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise

    logger.debug("Wrote snapshot %s", path)
