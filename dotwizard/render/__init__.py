"""Rendering: ANSI helpers, themes, code highlighting and the screen view."""

from .highlight import DEFAULT_STYLE, highlight_code
from .theme import UITheme, available_theme_names, resolve_theme
from .view import make_renderer, render_lines

__all__ = [
    "DEFAULT_STYLE",
    "UITheme",
    "available_theme_names",
    "highlight_code",
    "make_renderer",
    "render_lines",
    "resolve_theme",
]
