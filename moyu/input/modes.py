"""Modal key handling for the reader.

``handle_key`` is the single transition function: it routes one key token to
the handler for the active mode, mutates the ``ViewState`` it is given, and
performs no I/O. Routing priority is fixed:

1. the suspend toggle, from any mode;
2. everything else is discarded while suspended;
3. text entry while searching or jumping;
4. the help overlay, where only its toggle, escape and quit are live;
5. normal-mode bindings;
6. escape, which resets to a clean normal mode.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..reflow import reflow, wrap_width
from ..search import find_matches, initial_match_cursor, step_match_cursor
from ..state import (
    HELP_OVERLAY,
    NORMAL,
    SUSPENDED,
    HelpOverlay,
    Jumping,
    Searching,
    Suspended,
    ViewState,
    clamp_view_height,
)

SUSPEND_KEYS = frozenset({" "})
HELP_KEYS = frozenset({"h", "?"})
QUIT_KEYS = frozenset({"Q"})
ENTER = "ENTER"
ESC = "ESC"
BACKSPACE = "BACKSPACE"


@dataclass(frozen=True)
class KeyBinding:
    """Normal-mode keys sharing one handler; a ``True`` result means quit."""

    keys: tuple[str, ...]
    handler: Callable[[ViewState], bool | None]


def _key_name(key: str) -> str:
    """Drop the ``:col:row`` suffix carried by mouse tokens."""
    if key.startswith("MOUSE"):
        return key.split(":", 1)[0]
    return key


def _is_text_input(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def commit_search(state: ViewState, query: str) -> None:
    """Run ``query`` against the fragments and land on the first useful match."""
    state.last_query = query
    state.search_active = True
    state.matches = find_matches(state.fragments, query)
    state.match_cursor = 0
    if state.matches:
        state.match_cursor = initial_match_cursor(state.matches, state.current)
        state.current = state.matches[state.match_cursor]


def commit_jump(state: ViewState, buffer: str) -> None:
    """Move to 1-based line ``buffer`` when it names an existing fragment."""
    if not buffer.isdigit():
        return
    target = int(buffer)
    if 1 <= target <= state.fragment_count:
        state.current = target - 1


def _handle_searching(state: ViewState, mode: Searching, key: str) -> None:
    if key == ENTER:
        state.mode = NORMAL
        if mode.buffer:
            commit_search(state, mode.buffer)
    elif key == ESC:
        state.mode = NORMAL
    elif key == BACKSPACE:
        state.mode = Searching(mode.buffer[:-1])
    elif _is_text_input(key):
        state.mode = Searching(mode.buffer + key)


def _handle_jumping(state: ViewState, mode: Jumping, key: str) -> None:
    if key == ENTER:
        state.mode = NORMAL
        commit_jump(state, mode.buffer)
    elif key == ESC:
        state.mode = NORMAL
    elif key == BACKSPACE:
        state.mode = Jumping(mode.buffer[:-1])
    elif len(key) == 1 and "0" <= key <= "9":
        state.mode = Jumping(mode.buffer + key)


def _next_fragment(state: ViewState) -> None:
    state.move(1)


def _previous_fragment(state: ViewState) -> None:
    state.move(-1)


def _open_search(state: ViewState) -> None:
    state.mode = Searching()


def _open_jump(state: ViewState) -> None:
    state.mode = Jumping()


def _open_help(state: ViewState) -> None:
    state.mode = HELP_OVERLAY


def _cycle_match(direction: int) -> Callable[[ViewState], None]:
    def cycle(state: ViewState) -> None:
        if not state.search_active or not state.matches:
            return
        state.match_cursor = step_match_cursor(state.match_cursor, len(state.matches), direction)
        state.current = state.matches[state.match_cursor]

    return cycle


def _resize_view(delta: int) -> Callable[[ViewState], None]:
    def resize(state: ViewState) -> None:
        state.view_height = clamp_view_height(state.view_height + delta)

    return resize


def _quit(_state: ViewState) -> bool:
    return True


NORMAL_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(("j", "DOWN", "MOUSE_WHEEL_DOWN", "MOUSE_LEFT_DOWN"), _next_fragment),
    KeyBinding(("k", "UP", "MOUSE_WHEEL_UP"), _previous_fragment),
    KeyBinding(("/",), _open_search),
    KeyBinding(("G",), _open_jump),
    KeyBinding(tuple(sorted(HELP_KEYS)), _open_help),
    KeyBinding(("n",), _cycle_match(1)),
    KeyBinding(("N",), _cycle_match(-1)),
    KeyBinding(("+", "="), _resize_view(1)),
    KeyBinding(("-", "_"), _resize_view(-1)),
    KeyBinding(tuple(sorted(QUIT_KEYS)), _quit),
)

_NORMAL_DISPATCH: dict[str, Callable[[ViewState], bool | None]] = {
    key: binding.handler for binding in NORMAL_BINDINGS for key in binding.keys
}


def _reset_to_normal(state: ViewState) -> None:
    state.mode = NORMAL
    state.search_active = False


def handle_key(state: ViewState, key: str) -> bool:
    """Apply one key token to ``state`` and return ``True`` when the session should quit."""
    if key in SUSPEND_KEYS:
        state.mode = NORMAL if isinstance(state.mode, Suspended) else SUSPENDED
        return False

    mode = state.mode
    if isinstance(mode, Suspended):
        return False
    if isinstance(mode, Searching):
        _handle_searching(state, mode, key)
        return False
    if isinstance(mode, Jumping):
        _handle_jumping(state, mode, key)
        return False
    if isinstance(mode, HelpOverlay):
        if key in HELP_KEYS:
            state.mode = NORMAL
            return False
        if key in QUIT_KEYS:
            return True
        if key == ESC:
            _reset_to_normal(state)
        return False

    handler = _NORMAL_DISPATCH.get(_key_name(key))
    if handler is not None:
        return bool(handler(state))
    if key == ESC:
        _reset_to_normal(state)
    return False


def apply_reflow(state: ViewState, raw_lines: Sequence[str], term_columns: int) -> None:
    """Rebuild fragments for a new terminal width without touching the mode.

    The current index is clamped into the new sequence. A committed search is
    re-run against the new fragments and its cursor re-seated at the current
    position, so next/previous keep working after a resize.
    """
    state.fragments = reflow(raw_lines, wrap_width(term_columns))
    state.clamp_current()
    if state.search_active and state.last_query:
        state.matches = find_matches(state.fragments, state.last_query)
        state.match_cursor = initial_match_cursor(state.matches, state.current)
    else:
        state.matches = ()
        state.match_cursor = 0
    state.dirty = True
