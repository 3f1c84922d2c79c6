"""Persisted reading progress keyed by content identity.

One JSON object maps canonical content paths to
``{"last_line": int, "view_height": int}``. A missing or malformed file reads
as an empty mapping, and a failed write only costs the saved position.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_state_dir

logger = logging.getLogger(__name__)

APP_NAME = "moyu"
PROGRESS_FILENAME = "progress.json"
DEFAULT_PROGRESS_PATH = Path(user_state_dir(APP_NAME, appauthor=False)) / PROGRESS_FILENAME
LEGACY_PROGRESS_PATH = Path.home() / ".moyu_progress.json"
PROGRESS_PATH = DEFAULT_PROGRESS_PATH


@dataclass(frozen=True)
class ReadingProgress:
    """Where a document was left: fragment index and viewport height."""

    last_line: int = 0
    view_height: int = 0

    def to_json(self) -> dict[str, int]:
        return {"last_line": max(0, self.last_line), "view_height": max(0, self.view_height)}


def content_identity(path: str | os.PathLike[str]) -> str:
    """Return the canonical key for ``path``.

    Symlinks are resolved so every route to one file shares a key; if
    resolution fails the absolute, unresolved path is used instead.
    """
    absolute = os.path.abspath(os.fspath(path))
    try:
        return str(Path(absolute).resolve(strict=True))
    except (OSError, RuntimeError):
        return absolute


def _coerce_nonnegative_int(value: object) -> int:
    """Normalize JSON scalars: booleans and non-integers become ``0``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def _load_progress_path() -> Path:
    """Return the file to read, falling back to the legacy home-directory file."""
    if PROGRESS_PATH.exists():
        return PROGRESS_PATH
    if PROGRESS_PATH == DEFAULT_PROGRESS_PATH and LEGACY_PROGRESS_PATH.exists():
        return LEGACY_PROGRESS_PATH
    return PROGRESS_PATH


def load_progress() -> dict[str, ReadingProgress]:
    """Load every stored record.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    not a top-level JSON object. Entries that are not objects are dropped and
    unknown keys inside entries are ignored.
    """
    progress_path = _load_progress_path()
    try:
        data = json.loads(progress_path.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError) as exc:
        if not isinstance(exc, FileNotFoundError):
            logger.debug("ignoring unreadable progress file %s: %s", progress_path, exc)
        return {}
    if not isinstance(data, dict):
        return {}

    records: dict[str, ReadingProgress] = {}
    for identity, raw_record in data.items():
        if not isinstance(identity, str) or not isinstance(raw_record, dict):
            continue
        records[identity] = ReadingProgress(
            last_line=_coerce_nonnegative_int(raw_record.get("last_line", 0)),
            view_height=_coerce_nonnegative_int(raw_record.get("view_height", 0)),
        )
    return records


def save_progress(
    identity: str,
    progress: ReadingProgress,
    existing: dict[str, ReadingProgress],
) -> dict[str, ReadingProgress]:
    """Merge ``progress`` under ``identity`` and rewrite the whole file.

    The file is replaced atomically via a sibling temp file. Write failures are
    logged and otherwise ignored. Returns the merged mapping.
    """
    merged = dict(existing)
    merged[identity] = progress
    payload = json.dumps(
        {key: record.to_json() for key, record in merged.items()},
        indent=2,
        ensure_ascii=False,
    )
    tmp_name: str | None = None
    try:
        PROGRESS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=PROGRESS_PATH.parent,
            prefix=".progress-",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(payload + "\n")
        os.replace(tmp_name, PROGRESS_PATH)
        tmp_name = None
    except OSError as exc:
        logger.debug("could not save progress to %s: %s", PROGRESS_PATH, exc)
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
    return merged
