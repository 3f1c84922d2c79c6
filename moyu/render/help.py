"""Help overlay content.

The key manual is dressed up as a man page so the overlay fits the disguise.
"""

from __future__ import annotations

HELP_LINES: tuple[str, ...] = (
    "SYSDIAG(8)                System Diagnostics Manual               SYSDIAG(8)",
    "NAME: moyu - buffered diagnostic stream inspector",
    "",
    "CONTROLS:",
    "  j, Down, MouseLeft, WheelDown : Step forward in data stream (next line)",
    "  k, Up, WheelUp                : Step backward in data stream (prev line)",
    "  Space                         : Toggle SUSPEND (immediate UI suspension)",
    "  /, G                          : Search metadata / jump to line offset",
    "  n, N                          : Navigate through search matches",
    "  +, -                          : Resize dynamic kernel buffer height",
    "  h, ?                          : Show/hide this diagnostic manual",
    "  Esc                           : Clear search state / close prompts",
    "  Q                             : Terminate daemon and sync state to cache",
)


def help_pane_height() -> int:
    """Rows the overlay occupies at the bottom of the screen."""
    return len(HELP_LINES)
