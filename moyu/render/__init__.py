"""Render coordinator for the reader screen.

``describe_frame`` decides what every terminal row shows for the current
``ViewState`` and returns a plain description with no side effects.
``paint_frame`` turns that description into one ANSI frame on stdout.

The screen is bottom-anchored: decoy feed on top, a status row, then the
reading pane, help overlay, text prompt, or idle line at the bottom.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..ansi import clip_ansi_line
from ..feed import feed_severity, feed_window
from ..state import HelpOverlay, Jumping, Searching, Suspended, ViewState
from ..ui_theme import UITheme
from .help import HELP_LINES, help_pane_height

READING_PREFIX = ">> "
IDLE_LINE = ">> [IDLE] Awaiting SIGCONT..."
SUSPENDED_STATUS = "--- STATE: SUSPENDED (KERNEL_WAIT) ---"
SEARCH_PROMPT = "GREP_SCAN: /"
JUMP_PROMPT = "ADDR_JUMP: "


@dataclass(frozen=True)
class FrameRow:
    text: str = ""
    role: str = ""


@dataclass(frozen=True)
class Frame:
    """One full screen: exactly one ``FrameRow`` per terminal row."""

    rows: tuple[FrameRow, ...]

    def texts(self) -> list[str]:
        return [row.text for row in self.rows]


def running_status(state: ViewState) -> str:
    """Status row text showing position as a load percentage and line id."""
    total = state.fragment_count
    if total <= 0:
        return "--- STATE: RUNNING | Load: 0% | ID: 0/0 "
    position = state.current + 1
    return f"--- STATE: RUNNING | Load: {position * 100 // total}% | ID: {position}/{total} "


def describe_frame(state: ViewState, feed_lines: tuple[str, ...], rows: int) -> Frame:
    """Lay out ``rows`` terminal rows for ``state``.

    Rows that would fall above the top of a very short terminal are dropped.
    """
    screen = [FrameRow() for _ in range(max(0, rows))]

    def put(row: int, text: str, role: str) -> None:
        if 0 <= row < len(screen):
            screen[row] = FrameRow(text, role)

    mode = state.mode
    pane_height = help_pane_height() if isinstance(mode, HelpOverlay) else state.view_height

    feed_rows = rows - pane_height - 3
    for row, line in enumerate(feed_window(feed_lines, state.feed_offset, feed_rows)):
        put(row, line, f"feed_{feed_severity(line)}")

    status_row = rows - pane_height - 2
    if isinstance(mode, Suspended):
        put(status_row, SUSPENDED_STATUS, "status")
        put(rows - 1, IDLE_LINE, "idle")
    else:
        put(status_row, running_status(state), "status")

    if isinstance(mode, HelpOverlay):
        for offset, line in enumerate(HELP_LINES):
            put(rows - pane_height + offset, line, "help")
    elif isinstance(mode, Searching):
        put(rows - 1, SEARCH_PROMPT + mode.buffer, "search_prompt")
    elif isinstance(mode, Jumping):
        put(rows - 1, JUMP_PROMPT + mode.buffer, "jump_prompt")
    elif not isinstance(mode, Suspended):
        for offset in range(state.view_height):
            idx = state.current + offset
            if idx >= state.fragment_count:
                break
            put(rows - state.view_height + offset, READING_PREFIX + state.fragments[idx], "reading")

    return Frame(tuple(screen))


def compose_frame(frame: Frame, theme: UITheme, width: int) -> str:
    """Build the ANSI byte stream for ``frame``; rows are clipped to ``width - 1``."""
    line_width = max(1, width - 1)
    out: list[str] = ["\033[H\033[J"]
    for idx, row in enumerate(frame.rows):
        if idx:
            out.append("\r\n")
        out.append(theme.style(row.role, clip_ansi_line(row.text, line_width)))
    return "".join(out)


def paint_frame(frame: Frame, theme: UITheme, width: int) -> None:
    os.write(sys.stdout.fileno(), compose_frame(frame, theme, width).encode("utf-8", errors="replace"))


__all__ = [
    "Frame",
    "FrameRow",
    "HELP_LINES",
    "compose_frame",
    "describe_frame",
    "paint_frame",
    "running_status",
]
