"""Reader session bootstrap and shutdown.

Resolves the content identity, restores saved progress, builds the initial
view state, runs the loop, and writes progress back on a clean quit.
"""

from __future__ import annotations

import logging
import random
import shutil
import sys
from pathlib import Path

from ..config import ReaderSettings
from ..content import load_content_lines
from ..feed import load_feed, should_advance_feed
from ..input import apply_reflow
from ..progress import ReadingProgress, content_identity, load_progress, save_progress
from ..reflow import reflow, wrap_width
from ..render import describe_frame, paint_frame
from ..state import ViewState, clamp_view_height
from ..ui_theme import UITheme
from .loop import RuntimeLoopCallbacks, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_initial_state(
    raw_lines: list[str],
    columns: int,
    saved: ReadingProgress | None,
    default_view_height: int,
) -> ViewState:
    """Create the opening view state from content and any saved progress.

    A saved index past the end of the freshly reflowed content restarts at 0;
    a saved height of 0 means none was recorded.
    """
    state = ViewState(
        fragments=reflow(raw_lines, wrap_width(columns)),
        view_height=clamp_view_height(default_view_height),
    )
    if saved is None:
        return state
    if saved.view_height > 0:
        state.view_height = clamp_view_height(saved.view_height)
    if saved.last_line < state.fragment_count:
        state.current = saved.last_line
    return state


def run_reader(
    content_path: Path,
    feed_path: Path | None,
    settings: ReaderSettings,
    theme: UITheme,
    rng: random.Random | None = None,
) -> int:
    """Open ``content_path`` in the interactive reader and return the exit code."""
    identity = content_identity(content_path)
    stored = load_progress()
    raw_lines = load_content_lines(Path(identity))
    feed_lines = load_feed(feed_path)
    chance = settings.feed_advance_chance
    roll = rng if rng is not None else random.Random()

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    columns = shutil.get_terminal_size((80, 24)).columns
    state = build_initial_state(raw_lines, columns, stored.get(identity), settings.view_height)
    logger.info("opened %s at fragment %d of %d", identity, state.current, state.fragment_count)

    def reflow_for_width(new_columns: int) -> None:
        apply_reflow(state, raw_lines, new_columns)

    def paint(term_columns: int, term_lines: int) -> None:
        paint_frame(describe_frame(state, feed_lines, term_lines), theme, term_columns)

    def advance_feed() -> None:
        if should_advance_feed(chance, roll):
            state.feed_offset += 1

    run_main_loop(
        state,
        terminal,
        stdin_fd,
        columns,
        RuntimeLoopCallbacks(reflow=reflow_for_width, paint=paint, on_moved=advance_feed),
    )

    save_progress(identity, ReadingProgress(state.current, state.view_height), stored)
    logger.info("saved %s at fragment %d", identity, state.current)
    return 0
