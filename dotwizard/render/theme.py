"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the wizard chrome. The pygments style used for
LazyVim code samples is a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    reverse: str
    title: str
    description: str
    cursor: str
    option: str
    separator: str
    checked: str
    help: str
    success: str
    error: str
    warning: str
    running: str
    log: str
    code_border: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;38;5;81m",
    description="\033[2;38;5;250m",
    cursor="\033[1;38;5;213m",
    option="\033[38;5;252m",
    separator="\033[2m",
    checked="\033[38;5;42m",
    help="\033[2;38;5;245m",
    success="\033[38;5;42m",
    error="\033[1;38;5;203m",
    warning="\033[38;5;214m",
    running="\033[38;5;81m",
    log="\033[38;5;245m",
    code_border="\033[2;38;5;109m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;38;5;45m",
    description="\033[2;38;5;110m",
    cursor="\033[1;38;5;39m",
    option="\033[38;5;153m",
    separator="\033[2;38;5;31m",
    checked="\033[38;5;84m",
    help="\033[2;38;5;110m",
    success="\033[38;5;84m",
    error="\033[1;38;5;209m",
    warning="\033[38;5;215m",
    running="\033[38;5;45m",
    log="\033[38;5;110m",
    code_border="\033[2;38;5;31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    title="",
    description="",
    cursor="",
    option="",
    separator="",
    checked="",
    help="",
    success="",
    error="",
    warning="",
    running="",
    log="",
    code_border="",
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "UITheme",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
