"""Content loading for the reading pane.

Reads text with a tolerant encoding fallback, neutralizes terminal control
bytes, and splits it into raw lines. A missing or unreadable file degrades to a
single sentinel line instead of raising.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

STREAM_NOT_FOUND = "ERR: STREAM_NOT_FOUND"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def read_text(path: Path) -> str:
    """Read text as UTF-8 (skipping a BOM when present), else as latin-1.

    latin-1 maps every byte, so any readable file decodes.
    """
    data = path.read_bytes()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Make text safe to paint: tabs become spaces, control bytes are escaped."""
    if "\t" in source:
        source = source.replace("\t", " ")
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def split_raw_lines(text: str) -> list[str]:
    """Split text into lines the way a line scanner does.

    Lines end at ``\\n``; one trailing ``\\r`` per line is dropped, and a final
    newline does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_content_lines(path: Path) -> list[str]:
    """Return raw lines for ``path``, or the not-found sentinel line."""
    try:
        text = read_text(path)
    except OSError as exc:
        logger.warning("content unavailable at %s: %s", path, exc)
        return [STREAM_NOT_FOUND]
    return split_raw_lines(sanitize_terminal_text(text))
