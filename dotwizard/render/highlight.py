"""Syntax highlighting for LazyVim code samples.

Pygments lexes the sample by language name and formats it for 256-color
terminals. Unknown styles fall back to ``monokai`` and unknown languages to
plain text.
"""

from __future__ import annotations

import re

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTERS: dict[str, Terminal256Formatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes so samples cannot move the cursor or ring the bell."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


def normalize_style(style: str | None) -> str:
    if not style:
        return DEFAULT_STYLE
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_code(source: str, language: str, style: str | None = DEFAULT_STYLE) -> list[str]:
    """Return highlighted lines of ``source``, one entry per source line."""
    source = sanitize_terminal_text(source)
    try:
        lexer = get_lexer_by_name(language)
    except ClassNotFound:
        lexer = TextLexer()
    rendered = pygments_highlight(source, lexer, _formatter_for_style(normalize_style(style)))
    lines = rendered.rstrip("\n").split("\n")
    expected = source.count("\n") + 1
    return lines[:expected]


def plain_code(source: str) -> list[str]:
    return sanitize_terminal_text(source).split("\n")


__all__ = ["DEFAULT_STYLE", "highlight_code", "normalize_style", "plain_code", "sanitize_terminal_text"]
