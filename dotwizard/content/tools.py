"""Reference cards for the tools the installer can set up."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToolInfo:
    id: str
    name: str
    description: str
    pros: tuple[str, ...] = ()
    cons: tuple[str, ...] = ()
    website: str = ""


TERMINALS: tuple[ToolInfo, ...] = (
    ToolInfo(
        "alacritty",
        "Alacritty",
        "GPU-accelerated terminal focused on simplicity and raw speed.",
        pros=("Very fast rendering", "Plain TOML configuration", "Cross-platform"),
        cons=("No tabs or splits (pair it with a multiplexer)", "No ligatures"),
        website="https://alacritty.org",
    ),
    ToolInfo(
        "wezterm",
        "WezTerm",
        "GPU-accelerated terminal and multiplexer configured in Lua.",
        pros=("Built-in tabs, panes and SSH domains", "Scriptable with Lua", "Ligatures"),
        cons=("Higher memory usage", "Lua config has a learning curve"),
        website="https://wezfurlong.org/wezterm",
    ),
    ToolInfo(
        "kitty",
        "Kitty",
        "Feature-rich GPU terminal with its own graphics protocol.",
        pros=("Inline images", "Layouts and tabs", "Extensible with kittens"),
        cons=("macOS build is less polished", "Non-standard terminfo"),
        website="https://sw.kovidgoyal.net/kitty",
    ),
    ToolInfo(
        "ghostty",
        "Ghostty",
        "Native, fast terminal with sensible defaults.",
        pros=("Native UI on macOS and GTK", "Zero-config friendly", "Fast"),
        cons=("Young project", "Packaging on Debian/Ubuntu is limited"),
        website="https://ghostty.org",
    ),
)

SHELLS: tuple[ToolInfo, ...] = (
    ToolInfo(
        "fish",
        "Fish",
        "Friendly interactive shell with autosuggestions out of the box.",
        pros=("Autosuggestions and highlighting built in", "Readable scripting syntax"),
        cons=("Not POSIX compatible",),
        website="https://fishshell.com",
    ),
    ToolInfo(
        "zsh",
        "Zsh",
        "POSIX-compatible shell with a large plugin ecosystem.",
        pros=("Runs bash scripts", "Huge plugin ecosystem"),
        cons=("Needs plugins for a modern experience", "Slow startup with heavy configs"),
        website="https://www.zsh.org",
    ),
    ToolInfo(
        "nushell",
        "Nushell",
        "Structured-data shell where pipelines pass tables, not text.",
        pros=("Structured pipelines", "Built-in data formats (JSON, CSV, TOML)"),
        cons=("Not POSIX compatible", "Still evolving quickly"),
        website="https://www.nushell.sh",
    ),
)

MULTIPLEXERS: tuple[ToolInfo, ...] = (
    ToolInfo(
        "tmux",
        "Tmux",
        "The classic terminal multiplexer: sessions, windows and panes.",
        pros=("Available everywhere", "Sessions survive disconnects", "Mature plugin manager"),
        cons=("Prefix-key workflow takes practice",),
        website="https://github.com/tmux/tmux",
    ),
    ToolInfo(
        "zellij",
        "Zellij",
        "Modern multiplexer with discoverable keybindings and layouts.",
        pros=("On-screen key hints", "Floating panes", "WASM plugins"),
        cons=("Less ubiquitous than tmux",),
        website="https://zellij.dev",
    ),
)

NEOVIM = ToolInfo(
    "neovim",
    "Neovim",
    "Hyperextensible Vim-based editor, configured here on top of LazyVim.",
    pros=("Native LSP and Treesitter", "Lua configuration", "Fast and keyboard driven"),
    cons=("Modal editing has a learning curve",),
    website="https://neovim.io",
)

TOOL_GROUPS: dict[str, tuple[ToolInfo, ...]] = {
    "terminals": TERMINALS,
    "shells": SHELLS,
    "multiplexers": MULTIPLEXERS,
    "neovim": (NEOVIM,),
}


def find_tool(tool_id: str) -> ToolInfo | None:
    for group in TOOL_GROUPS.values():
        for tool in group:
            if tool.id == tool_id:
                return tool
    return None


__all__ = [
    "MULTIPLEXERS",
    "NEOVIM",
    "SHELLS",
    "TERMINALS",
    "TOOL_GROUPS",
    "ToolInfo",
    "find_tool",
]
