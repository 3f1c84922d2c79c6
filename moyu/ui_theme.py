"""UI theme definitions and selection helpers.

Themes map semantic frame-row roles to ``pygments.console`` format specs
(``"cyan"``, ``"*blue*"`` for bold, ``""`` for unstyled).
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat


@dataclass(frozen=True)
class UITheme:
    """Per-role console styles used by the frame painter."""

    name: str
    feed_info: str
    feed_warn: str
    feed_error: str
    feed_debug: str
    status: str
    idle: str
    help: str
    search_prompt: str
    jump_prompt: str
    reading: str

    def style(self, role: str, text: str) -> str:
        """Wrap ``text`` in the ANSI codes for ``role``; unknown roles stay plain."""
        spec = getattr(self, role, "") if role != "name" else ""
        if not spec or not text:
            return text
        return ansiformat(spec, text)


DEFAULT_THEME = UITheme(
    name="default",
    feed_info="cyan",
    feed_warn="yellow",
    feed_error="red",
    feed_debug="brightblack",
    status="blue",
    idle="brightblack",
    help="green",
    search_prompt="*yellow*",
    jump_prompt="*magenta*",
    reading="gray",
)

AMBER_THEME = UITheme(
    name="amber",
    feed_info="yellow",
    feed_warn="brightyellow",
    feed_error="*red*",
    feed_debug="brightblack",
    status="*yellow*",
    idle="brightblack",
    help="yellow",
    search_prompt="*brightyellow*",
    jump_prompt="*brightyellow*",
    reading="*gray*",
)

PLAIN_THEME = UITheme(
    name="plain",
    feed_info="",
    feed_warn="",
    feed_error="",
    feed_debug="",
    status="",
    idle="",
    help="",
    search_prompt="",
    jump_prompt="",
    reading="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    AMBER_THEME.name: AMBER_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "AMBER_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
