"""Session state for the reader: interaction modes and the owned view state.

The five interaction modes form one tagged union of frozen dataclasses, so a
session is always in exactly one of them. Text-entry buffers live inside the
mode value that owns them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

MIN_VIEW_HEIGHT = 1
MAX_VIEW_HEIGHT = 12
DEFAULT_VIEW_HEIGHT = 3


@dataclass(frozen=True)
class Normal:
    """Reading mode; navigation keys are live."""


@dataclass(frozen=True)
class Searching:
    buffer: str = ""


@dataclass(frozen=True)
class Jumping:
    buffer: str = ""


@dataclass(frozen=True)
class HelpOverlay:
    """Key manual shown in place of the reading pane."""


@dataclass(frozen=True)
class Suspended:
    """Disguise screen; only the suspend toggle is honored."""


Mode = Union[Normal, Searching, Jumping, HelpOverlay, Suspended]

NORMAL = Normal()
HELP_OVERLAY = HelpOverlay()
SUSPENDED = Suspended()


def clamp_view_height(height: int) -> int:
    return max(MIN_VIEW_HEIGHT, min(MAX_VIEW_HEIGHT, height))


@dataclass
class ViewState:
    """Everything the event loop mutates while a document is open."""

    fragments: tuple[str, ...] = ()
    current: int = 0
    view_height: int = DEFAULT_VIEW_HEIGHT
    mode: Mode = NORMAL
    last_query: str = ""
    search_active: bool = False
    matches: tuple[int, ...] = ()
    match_cursor: int = 0
    feed_offset: int = 0
    dirty: bool = True

    @property
    def fragment_count(self) -> int:
        return len(self.fragments)

    def clamp_current(self) -> None:
        """Pull ``current`` back inside ``[0, fragment_count - 1]``."""
        if not self.fragments:
            self.current = 0
            return
        self.current = max(0, min(self.current, len(self.fragments) - 1))

    def move(self, delta: int) -> bool:
        """Step ``current`` by ``delta`` within bounds; return whether it moved."""
        if not self.fragments:
            return False
        target = max(0, min(self.current + delta, len(self.fragments) - 1))
        if target == self.current:
            return False
        self.current = target
        return True
