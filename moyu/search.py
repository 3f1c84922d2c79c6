"""Case-insensitive substring search over reflowed fragments."""

from __future__ import annotations

from collections.abc import Sequence


def find_matches(fragments: Sequence[str], query: str) -> tuple[int, ...]:
    """Return ascending indices of fragments containing ``query``.

    Matching uses ``str.casefold`` on both sides. Callers never pass an empty
    query; if one arrives anyway every fragment matches.
    """
    folded = query.casefold()
    return tuple(idx for idx, fragment in enumerate(fragments) if folded in fragment.casefold())


def initial_match_cursor(matches: Sequence[int], current: int) -> int:
    """Pick the match-set cursor to land on after a commit.

    Scans forward for the first match at or after ``current``; when every match
    lies before it, wraps to the first match in the document.
    """
    for cursor, fragment_idx in enumerate(matches):
        if fragment_idx >= current:
            return cursor
    return 0


def step_match_cursor(cursor: int, match_count: int, direction: int) -> int:
    """Move ``cursor`` one step in ``direction`` around a cyclic match set."""
    if match_count <= 0:
        return 0
    return (cursor + direction) % match_count
