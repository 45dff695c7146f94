"""Keymap reference tables for Neovim, Tmux, Zellij, and Ghostty."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Keymap:
    keys: str
    description: str
    mode: str = ""


@dataclass(frozen=True)
class KeymapCategory:
    name: str
    keymaps: tuple[Keymap, ...]


def _km(*rows: tuple[str, ...]) -> tuple[Keymap, ...]:
    return tuple(Keymap(*row) for row in rows)


NEOVIM_KEYMAPS: tuple[KeymapCategory, ...] = (
    KeymapCategory(
        "General",
        _km(
            ("<Space>", "Leader key", "n"),
            ("<leader>w", "Save file", "n"),
            ("<leader>q", "Quit window", "n"),
            ("<C-s>", "Save file", "n,i"),
            ("<Esc>", "Clear search highlight", "n"),
        ),
    ),
    KeymapCategory(
        "Navigation",
        _km(
            ("<C-h/j/k/l>", "Move between splits", "n"),
            ("<S-h> / <S-l>", "Previous / next buffer", "n"),
            ("<leader><space>", "Find files", "n"),
            ("<leader>/", "Grep in project", "n"),
            ("<leader>e", "Toggle file explorer", "n"),
        ),
    ),
    KeymapCategory(
        "LSP",
        _km(
            ("gd", "Go to definition", "n"),
            ("gr", "References", "n"),
            ("K", "Hover documentation", "n"),
            ("<leader>ca", "Code action", "n,v"),
            ("<leader>cr", "Rename symbol", "n"),
            ("]d / [d", "Next / previous diagnostic", "n"),
        ),
    ),
    KeymapCategory(
        "Git",
        _km(
            ("<leader>gg", "Open lazygit", "n"),
            ("<leader>gb", "Blame line", "n"),
            ("]h / [h", "Next / previous hunk", "n"),
        ),
    ),
)

TMUX_KEYMAPS: tuple[KeymapCategory, ...] = (
    KeymapCategory(
        "Sessions",
        _km(
            ("prefix d", "Detach session"),
            ("prefix s", "List sessions"),
            ("prefix $", "Rename session"),
        ),
    ),
    KeymapCategory(
        "Windows",
        _km(
            ("prefix c", "New window"),
            ("prefix n / p", "Next / previous window"),
            ("prefix ,", "Rename window"),
            ("prefix &", "Kill window"),
        ),
    ),
    KeymapCategory(
        "Panes",
        _km(
            ("prefix v", "Split vertically"),
            ("prefix d", "Split horizontally"),
            ("prefix h/j/k/l", "Move between panes"),
            ("prefix z", "Zoom pane"),
            ("prefix x", "Kill pane"),
        ),
    ),
)

ZELLIJ_KEYMAPS: tuple[KeymapCategory, ...] = (
    KeymapCategory(
        "Modes",
        _km(
            ("Ctrl p", "Pane mode"),
            ("Ctrl t", "Tab mode"),
            ("Ctrl n", "Resize mode"),
            ("Ctrl s", "Scroll mode"),
            ("Ctrl o", "Session mode"),
            ("Ctrl g", "Lock mode"),
        ),
    ),
    KeymapCategory(
        "Panes",
        _km(
            ("Alt n", "New pane"),
            ("Alt h/j/k/l", "Move focus"),
            ("Alt f", "Toggle floating panes"),
            ("Alt =/-", "Resize pane"),
        ),
    ),
)

GHOSTTY_KEYMAPS: tuple[KeymapCategory, ...] = (
    KeymapCategory(
        "Tabs",
        _km(
            ("Cmd/Ctrl+Shift t", "New tab"),
            ("Cmd/Ctrl+Shift w", "Close tab"),
            ("Cmd/Ctrl+Shift [ / ]", "Previous / next tab"),
        ),
    ),
    KeymapCategory(
        "Splits",
        _km(
            ("Cmd/Ctrl+Shift d", "Split right"),
            ("Cmd/Ctrl+Shift e", "Split down"),
            ("Cmd/Ctrl+Alt arrows", "Move between splits"),
        ),
    ),
    KeymapCategory(
        "General",
        _km(
            ("Cmd/Ctrl+Shift ,", "Reload config"),
            ("Cmd/Ctrl+=/-", "Font size up / down"),
        ),
    ),
)

KEYMAPS_BY_TOOL: dict[str, tuple[KeymapCategory, ...]] = {
    "neovim": NEOVIM_KEYMAPS,
    "tmux": TMUX_KEYMAPS,
    "zellij": ZELLIJ_KEYMAPS,
    "ghostty": GHOSTTY_KEYMAPS,
}


def keymap_categories(tool: str) -> tuple[KeymapCategory, ...]:
    return KEYMAPS_BY_TOOL.get(tool, ())


__all__ = [
    "GHOSTTY_KEYMAPS",
    "KEYMAPS_BY_TOOL",
    "Keymap",
    "KeymapCategory",
    "NEOVIM_KEYMAPS",
    "TMUX_KEYMAPS",
    "ZELLIJ_KEYMAPS",
    "keymap_categories",
]
