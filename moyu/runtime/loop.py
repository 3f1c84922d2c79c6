"""Main interactive event loop for the reader.

Blocks for one key at a time, lets the mode machine update the view state,
and repaints when something changed. Width changes trigger a full reflow.
Feature logic lives in the mode machine and in the injected callbacks.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import handle_key, read_key
from ..state import ViewState
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    ``reflow`` receives the new terminal width, ``paint`` the terminal
    columns and rows, and ``on_moved`` fires after a key changed the current
    fragment.
    """

    reflow: Callable[[int], None]
    paint: Callable[[int, int], None]
    on_moved: Callable[[], None]


def run_main_loop(
    state: ViewState,
    terminal: TerminalController,
    stdin_fd: int,
    columns: int,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until a quit key is handled.

    ``columns`` is the width the current fragments were built for.
    """
    last_columns = columns
    last_lines = -1
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            if term.columns != last_columns:
                last_columns = term.columns
                callbacks.reflow(term.columns)
                state.dirty = True
            if term.lines != last_lines:
                last_lines = term.lines
                state.dirty = True

            if state.dirty:
                callbacks.paint(term.columns, term.lines)
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                # Ctrl+C must not drop the disguise.
                continue
            if key == "":
                continue
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = key == "ENTER_CR"
            if key in {"ENTER_CR", "ENTER_LF"}:
                key = "ENTER"

            previous = state.current
            if handle_key(state, key):
                break
            if state.current != previous:
                callbacks.on_moved()
            state.dirty = True
