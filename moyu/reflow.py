"""Reflow engine: wrap raw text lines into display-width-bounded fragments.

Fragments are plain strings. The whole sequence is rebuilt whenever the
terminal width changes; nothing is re-wrapped incrementally.
"""

from __future__ import annotations

from collections.abc import Iterable

from .ansi import char_display_width

# Columns reserved for the ">> " reading prefix plus right-hand slack.
PREFIX_MARGIN = 8


def wrap_width(term_columns: int) -> int:
    """Return the fragment width used for a terminal ``term_columns`` wide."""
    return term_columns - PREFIX_MARGIN


def reflow_line(raw_line: str, max_width: int) -> list[str]:
    """Split one raw line into fragments no wider than ``max_width`` columns.

    The line is stripped first; an empty line yields a single empty fragment.
    ``max_width <= 0`` degenerates to one fragment per character, and a single
    character wider than ``max_width`` always gets a fragment of its own.
    """
    text = raw_line.strip()
    if not text:
        return [""]
    if max_width <= 0:
        return list(text)

    fragments: list[str] = []
    buffer: list[str] = []
    used = 0
    for ch in text:
        w = char_display_width(ch)
        if buffer and used + w > max_width:
            fragments.append("".join(buffer))
            buffer = []
            used = 0
        buffer.append(ch)
        used += w
    fragments.append("".join(buffer))
    return fragments


def reflow(raw_lines: Iterable[str], max_width: int) -> tuple[str, ...]:
    """Reflow every raw line in order into one flat fragment tuple."""
    fragments: list[str] = []
    for raw_line in raw_lines:
        fragments.extend(reflow_line(raw_line, max_width))
    return tuple(fragments)
