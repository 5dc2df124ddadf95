"""Color theme definitions and selection helpers.

A theme decorates directory rows. ANSI sequences come from Pygments' console
code table; the plain theme returns text untouched.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO

from pygments.console import codes


@dataclass(frozen=True)
class UITheme:
    """ANSI palette used by the row renderer."""

    name: str
    tree_dir: str
    reset: str

    def decorate_directory(self, text: str) -> str:
        if not self.tree_dir:
            return text
        return f"{self.tree_dir}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    tree_dir=codes["blue"],
    reset=codes["reset"],
)

OCEAN_THEME = UITheme(
    name="ocean",
    tree_dir=codes["bold"] + codes["brightcyan"],
    reset=codes["reset"],
)

PLAIN_THEME = UITheme(
    name="plain",
    tree_dir="",
    reset="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
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


def stream_supports_color(stream: TextIO | None) -> bool:
    """Return whether ``stream`` is a terminal and ``NO_COLOR`` is unset."""
    if os.environ.get("NO_COLOR"):
        return False
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def resolve_theme(
    name: str | None,
    *,
    no_color: bool = False,
    stream: TextIO | None = None,
) -> UITheme:
    """Return concrete theme for requested name, color mode, and output stream."""
    if no_color or not stream_supports_color(stream):
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "stream_supports_color",
    "resolve_theme",
]
