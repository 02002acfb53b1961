"""Listing theme definitions and selection helpers.

Themes are ANSI palettes applied to entry names at render time. The plain
theme carries empty sequences and is what disabled color resolves to.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the entry formatter."""

    name: str
    directory: str
    reset: str


DEFAULT_THEME = ListingTheme(
    name="default",
    directory="\033[34m",
    reset="\033[0m",
)

BOLD_THEME = ListingTheme(
    name="bold",
    directory="\033[1;34m",
    reset="\033[0m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    directory="\033[1;38;5;45m",
    reset="\033[0m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    directory="",
    reset="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    BOLD_THEME.name: BOLD_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES))


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return the palette for ``name``; unknown or blank names get the default."""
    if no_color:
        return PLAIN_THEME
    return _THEMES.get(str(name or "").strip().lower(), DEFAULT_THEME)


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "BOLD_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
