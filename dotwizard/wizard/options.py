"""Option rows for every list-driven screen.

Plain screens expose ``list[Option]``; the handler resolves the row under the
cursor by ``value``. Multi-select screens expose ``SelectionList`` entries
instead. Both row kinds carry a ``separator`` flag, which is all
``move_cursor`` looks at.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..content.keymaps import keymap_categories
from ..content.lazyvim import LAZYVIM_TOPICS
from ..selection.categories import MODULE_CATEGORIES, category_selection
from ..selection.model import SEPARATOR_ENTRY, SEPARATOR_LABEL, Entry, EntryKind, SelectionList
from ..services.system import OS_DEBIAN, OS_LINUX, OS_MAC, OS_TERMUX
from ..skills.layout import browse_entries, install_candidates, remove_candidates, skill_selection
from .screens import KEYMAP_TOOL_BY_SCREEN, Screen

if TYPE_CHECKING:
    from .state import WizardState

BACK = "back"
CONFIRM = "confirm"
LEARN = "learn"


@dataclass(frozen=True)
class Option:
    label: str
    value: str = ""
    separator: bool = False


SEPARATOR = Option(SEPARATOR_LABEL, separator=True)
BACK_OPTION = Option("← Back", BACK)


def move_cursor(rows: Sequence[object], cursor: int, delta: int) -> int:
    """Step ``cursor`` by ``delta`` (clamped), hopping over one separator.

    Works for any row type with a ``separator`` attribute. A hop that would
    leave the list keeps the cursor where it was.
    """
    if not rows:
        return 0
    target = max(0, min(len(rows) - 1, cursor + delta))
    if target == cursor or not getattr(rows[target], "separator", False):
        return target
    beyond = target + (1 if delta > 0 else -1)
    if 0 <= beyond < len(rows) and not getattr(rows[beyond], "separator", False):
        return beyond
    return cursor


def first_selectable(rows: Sequence[object]) -> int:
    for index, row in enumerate(rows):
        if not getattr(row, "separator", False):
            return index
    return 0


AI_TOOLS: tuple[tuple[str, str], ...] = (
    ("claude", "Claude Code"),
    ("opencode", "OpenCode"),
    ("gemini", "Gemini CLI"),
    ("copilot", "GitHub Copilot"),
    ("codex", "Codex CLI"),
)
AI_TOOLS_CONFIRM_LABEL = "✅ Confirm selection"

PRESETS: tuple[Option, ...] = (
    Option("🔧 Custom — Pick individual modules", "custom"),
    SEPARATOR,
    Option("🎯 Minimal — Core + git commands only", "minimal"),
    Option("🖥️  Frontend — React, Vue, Angular, testing, security hooks", "frontend"),
    Option("⚙️  Backend — APIs, databases, microservices, security hooks", "backend"),
    Option("🔄 Fullstack — Frontend + Backend + infra + all commands", "fullstack"),
    Option("📊 Data — Data engineering, ML/AI, analytics", "data"),
    Option("📦 Complete — Everything included", "complete"),
)

PROJECT_STACKS: tuple[Option, ...] = (
    Option("Angular", "angular"),
    Option("Node.js", "node"),
    Option("Go", "go"),
    Option("Python", "python"),
    Option("Rust", "rust"),
    Option("Java", "java"),
    Option("Ruby", "ruby"),
    Option("PHP", "php"),
    Option("Other", "other"),
)

PROJECT_MEMORIES: tuple[Option, ...] = (
    Option("🧠 Obsidian Brain", "obsidian-brain"),
    Option("📋 VibeKanban", "vibekanban"),
    Option("🧠 Engram", "engram"),
    Option("📝 Simple", "simple"),
    Option("❌ None", "none"),
)

PROJECT_CIS: tuple[Option, ...] = (
    Option("GitHub Actions", "github"),
    Option("GitLab CI", "gitlab"),
    Option("Woodpecker", "woodpecker"),
    Option("None", "none"),
)


def ai_tool_selection(selected: list[bool]) -> SelectionList:
    return SelectionList(
        [label for _, label in AI_TOOLS],
        selected,
        select_all=False,
        footer=(SEPARATOR_ENTRY, Entry(EntryKind.CONFIRM, AI_TOOLS_CONFIRM_LABEL)),
    )


def _main_menu(state: WizardState) -> list[Option]:
    options = [
        Option("🚀 Start Installation", "install"),
        Option("📚 Learn & Practice", "learn"),
    ]
    if state.available_backups:
        options.append(Option("🔄 Restore from Backup", "restore"))
    options.extend(
        [
            Option("📦 Initialize Project", "project"),
            Option("🎯 Skill Manager", "skills"),
            Option("❌ Exit", "exit"),
        ]
    )
    return options


OS_OPTIONS: tuple[Option, ...] = (
    Option("macOS", OS_MAC),
    Option("Linux", OS_LINUX),
    Option("Termux", OS_TERMUX),
)


def _os_options(state: WizardState) -> list[Option]:
    detected = state.system.wizard_os
    return [
        Option(f"{option.label} (detected)", option.value) if option.value == detected else option
        for option in OS_OPTIONS
    ]


def _terminal_options(state: WizardState) -> list[Option]:
    alacritty = "Alacritty"
    if state.choices.os == OS_LINUX and state.system.os in (OS_DEBIAN, OS_LINUX):
        alacritty = "Alacritty ⏱️  (builds from source, installs Rust ~5-10 min)"
    options = [Option(alacritty, "alacritty"), Option("WezTerm", "wezterm")]
    if state.choices.os == OS_MAC:
        options.append(Option("Kitty", "kitty"))
    options.extend(
        [
            Option("Ghostty", "ghostty"),
            Option("None", "none"),
            SEPARATOR,
            Option("ℹ️  Learn about terminals", LEARN),
        ]
    )
    return options


def _restore_options(state: WizardState) -> list[Option]:
    options = [Option(backup.label, str(index)) for index, backup in enumerate(state.available_backups)]
    return options + [SEPARATOR, BACK_OPTION]


def _category_options(state: WizardState) -> list[Option]:
    options = [
        Option(category.option_label(state.ai_category_selected), category.id)
        for category in MODULE_CATEGORIES
    ]
    return options + [SEPARATOR, Option("✅ Confirm selection", CONFIRM)]


def _keymap_tool_options(state: WizardState) -> list[Option]:
    tool = KEYMAP_TOOL_BY_SCREEN[state.screen]
    options = [Option(category.name, str(index)) for index, category in enumerate(keymap_categories(tool))]
    return options + [SEPARATOR, BACK_OPTION]


def _lazyvim_options(state: WizardState) -> list[Option]:
    options = [Option(topic.title, str(index)) for index, topic in enumerate(LAZYVIM_TOPICS)]
    return options + [SEPARATOR, BACK_OPTION]


def _static(*options: Option):
    return lambda state: list(options)


_BUILDERS = {
    Screen.MAIN_MENU: _main_menu,
    Screen.LEARN_MENU: _static(
        Option("📚 Learn About Tools", "tools"),
        Option("⌨️  Keymaps Reference", "keymaps"),
        Option("📖 LazyVim Guide", "lazyvim"),
        Option("🎮 Vim Trainer", "trainer"),
        SEPARATOR,
        BACK_OPTION,
    ),
    Screen.KEYMAPS_MENU: _static(
        Option("Neovim", "neovim"),
        Option("Tmux", "tmux"),
        Option("Zellij", "zellij"),
        Option("Ghostty", "ghostty"),
        SEPARATOR,
        BACK_OPTION,
    ),
    Screen.OS_SELECT: _os_options,
    Screen.TERMINAL_SELECT: _terminal_options,
    Screen.FONT_SELECT: _static(
        Option("Yes, install Iosevka Term Nerd Font", "yes"),
        Option("No, I already have it", "no"),
    ),
    Screen.SHELL_SELECT: _static(
        Option("Fish", "fish"),
        Option("Zsh", "zsh"),
        Option("Nushell", "nushell"),
        SEPARATOR,
        Option("ℹ️  Learn about shells", LEARN),
    ),
    Screen.WM_SELECT: _static(
        Option("Tmux", "tmux"),
        Option("Zellij", "zellij"),
        Option("None", "none"),
        SEPARATOR,
        Option("ℹ️  Learn about multiplexers", LEARN),
    ),
    Screen.NVIM_SELECT: _static(
        Option("Yes, install Neovim with config", "yes"),
        Option("No, skip Neovim", "no"),
        SEPARATOR,
        Option("ℹ️  Learn about Neovim", LEARN),
        Option("⌨️  View Keymaps", "keymaps"),
        Option("📖 LazyVim Guide", "lazyvim"),
    ),
    Screen.AI_FRAMEWORK_CONFIRM: _static(
        Option("Yes, install AI Framework", "yes"),
        Option("No, skip framework", "no"),
    ),
    Screen.AI_FRAMEWORK_PRESET: _static(*PRESETS),
    Screen.AI_FRAMEWORK_CATEGORIES: _category_options,
    Screen.GHOSTTY_WARNING: _static(
        Option("⚠️  Continue with Ghostty anyway", "continue"),
        Option("🔄 Choose a different terminal", "change"),
        Option("❌ Cancel installation", "cancel"),
    ),
    Screen.BACKUP_CONFIRM: _static(
        Option("✅ Install with Backup (recommended)", "backup"),
        Option("⚠️  Install without Backup", "no-backup"),
        Option("❌ Cancel", "cancel"),
    ),
    Screen.RESTORE_BACKUP: _restore_options,
    Screen.RESTORE_CONFIRM: _static(
        Option("✅ Yes, restore this backup", "restore"),
        Option("🗑️  Delete this backup", "delete"),
        Option("❌ Cancel", "cancel"),
    ),
    Screen.LEARN_TERMINALS: _static(
        Option("Alacritty", "alacritty"),
        Option("WezTerm", "wezterm"),
        Option("Kitty", "kitty"),
        Option("Ghostty", "ghostty"),
        SEPARATOR,
        BACK_OPTION,
    ),
    Screen.LEARN_SHELLS: _static(
        Option("Fish", "fish"),
        Option("Zsh", "zsh"),
        Option("Nushell", "nushell"),
        SEPARATOR,
        BACK_OPTION,
    ),
    Screen.LEARN_WM: _static(
        Option("Tmux", "tmux"),
        Option("Zellij", "zellij"),
        SEPARATOR,
        BACK_OPTION,
    ),
    Screen.LEARN_NVIM: _static(
        Option("View Features", "neovim"),
        Option("View Keymaps", "keymaps"),
        Option("📖 LazyVim Guide", "lazyvim"),
        SEPARATOR,
        BACK_OPTION,
    ),
    Screen.KEYMAPS: _keymap_tool_options,
    Screen.KEYMAPS_TMUX: _keymap_tool_options,
    Screen.KEYMAPS_ZELLIJ: _keymap_tool_options,
    Screen.KEYMAPS_GHOSTTY: _keymap_tool_options,
    Screen.LEARN_LAZYVIM: _lazyvim_options,
    Screen.PROJECT_STACK: _static(*PROJECT_STACKS),
    Screen.PROJECT_MEMORY: _static(*PROJECT_MEMORIES),
    Screen.PROJECT_OBSIDIAN_INSTALL: _static(
        Option("Yes, install Obsidian", "yes"),
        Option("No, continue without it", "no"),
    ),
    Screen.PROJECT_ENGRAM: _static(
        Option("Yes, add Engram too", "yes"),
        Option("No, just Obsidian Brain", "no"),
    ),
    Screen.PROJECT_CI: _static(*PROJECT_CIS),
    Screen.PROJECT_CONFIRM: _static(
        Option("✅ Confirm & Initialize", CONFIRM),
        Option("❌ Cancel", "cancel"),
    ),
    Screen.SKILL_MENU: _static(
        Option("🔍 Browse Skills", "browse"),
        Option("📥 Install Skills", "install"),
        Option("🗑️  Remove Skills", "remove"),
        Option("🔄 Update Catalog", "update"),
        SEPARATOR,
        BACK_OPTION,
    ),
}


def screen_options(state: WizardState) -> list[Option]:
    """Plain option rows for ``state.screen``; ``[]`` for non-list screens."""
    builder = _BUILDERS.get(state.screen)
    if builder is None:
        return []
    return builder(state)


def screen_selection(state: WizardState) -> SelectionList | None:
    """Multi-select list backing ``state.screen``, if it is a multi-select screen.

    The returned list writes through to the state's own flag lists, which the
    handlers create when the screen is entered.
    """
    if state.screen is Screen.AI_TOOLS_SELECT:
        flags = state.ai_tool_selected
        if len(flags) != len(AI_TOOLS):
            flags = [False] * len(AI_TOOLS)
        return ai_tool_selection(flags)
    if state.screen is Screen.AI_FRAMEWORK_CATEGORY_ITEMS:
        if not 0 <= state.selected_category < len(MODULE_CATEGORIES):
            return None
        category = MODULE_CATEGORIES[state.selected_category]
        flags = (state.ai_category_selected or {}).get(category.id)
        if flags is None or len(flags) != len(category.items):
            flags = [False] * len(category.items)
        return category_selection(category, flags)
    if state.screen in (Screen.SKILL_INSTALL, Screen.SKILL_REMOVE):
        removing = state.screen is Screen.SKILL_REMOVE
        skills = skill_candidates(state)
        flags = state.skill_selected
        if len(flags) != len(skills):
            flags = [False] * len(skills)
        return skill_selection(skills, flags, removing=removing)
    return None


def skill_candidates(state: WizardState) -> list:
    """Skills listed on the install or remove screen, in row order."""
    if state.screen is Screen.SKILL_REMOVE:
        return remove_candidates(state.skill_catalog)
    return install_candidates(state.skill_catalog)


def screen_rows(state: WizardState) -> list:
    """Every cursor-addressable row on the current screen."""
    selection = screen_selection(state)
    if selection is not None:
        return selection.entries()
    if state.screen is Screen.SKILL_BROWSE:
        return browse_entries(state.skill_catalog)
    return screen_options(state)


__all__ = [
    "AI_TOOLS",
    "BACK",
    "BACK_OPTION",
    "CONFIRM",
    "LEARN",
    "OS_OPTIONS",
    "Option",
    "PRESETS",
    "PROJECT_CIS",
    "PROJECT_MEMORIES",
    "PROJECT_STACKS",
    "SEPARATOR",
    "ai_tool_selection",
    "first_selectable",
    "move_cursor",
    "screen_options",
    "screen_rows",
    "screen_selection",
    "skill_candidates",
]
