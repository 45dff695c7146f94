"""Closed set of wizard screens plus their titles and descriptions."""

from __future__ import annotations

from enum import Enum


class Screen(Enum):
    WELCOME = "welcome"
    MAIN_MENU = "main_menu"
    LEARN_MENU = "learn_menu"
    # Install wizard
    OS_SELECT = "os_select"
    TERMINAL_SELECT = "terminal_select"
    FONT_SELECT = "font_select"
    SHELL_SELECT = "shell_select"
    WM_SELECT = "wm_select"
    NVIM_SELECT = "nvim_select"
    AI_TOOLS_SELECT = "ai_tools_select"
    AI_FRAMEWORK_CONFIRM = "ai_framework_confirm"
    AI_FRAMEWORK_PRESET = "ai_framework_preset"
    AI_FRAMEWORK_CATEGORIES = "ai_framework_categories"
    AI_FRAMEWORK_CATEGORY_ITEMS = "ai_framework_category_items"
    GHOSTTY_WARNING = "ghostty_warning"
    # Install run
    BACKUP_CONFIRM = "backup_confirm"
    INSTALLING = "installing"
    COMPLETE = "complete"
    ERROR = "error"
    # Backup restore
    RESTORE_BACKUP = "restore_backup"
    RESTORE_CONFIRM = "restore_confirm"
    # Learn
    LEARN_TERMINALS = "learn_terminals"
    LEARN_SHELLS = "learn_shells"
    LEARN_WM = "learn_wm"
    LEARN_NVIM = "learn_nvim"
    # Keymaps
    KEYMAPS_MENU = "keymaps_menu"
    KEYMAPS = "keymaps"
    KEYMAP_CATEGORY = "keymap_category"
    KEYMAPS_TMUX = "keymaps_tmux"
    KEYMAPS_TMUX_CATEGORY = "keymaps_tmux_category"
    KEYMAPS_ZELLIJ = "keymaps_zellij"
    KEYMAPS_ZELLIJ_CATEGORY = "keymaps_zellij_category"
    KEYMAPS_GHOSTTY = "keymaps_ghostty"
    KEYMAPS_GHOSTTY_CATEGORY = "keymaps_ghostty_category"
    # LazyVim guide
    LEARN_LAZYVIM = "learn_lazyvim"
    LAZYVIM_TOPIC = "lazyvim_topic"
    # Vim trainer
    TRAINER_MENU = "trainer_menu"
    TRAINER_LESSON = "trainer_lesson"
    TRAINER_PRACTICE = "trainer_practice"
    TRAINER_BOSS = "trainer_boss"
    TRAINER_RESULT = "trainer_result"
    TRAINER_BOSS_RESULT = "trainer_boss_result"
    # Project init
    PROJECT_PATH = "project_path"
    PROJECT_STACK = "project_stack"
    PROJECT_MEMORY = "project_memory"
    PROJECT_OBSIDIAN_INSTALL = "project_obsidian_install"
    PROJECT_ENGRAM = "project_engram"
    PROJECT_CI = "project_ci"
    PROJECT_CONFIRM = "project_confirm"
    PROJECT_INSTALLING = "project_installing"
    PROJECT_RESULT = "project_result"
    # Skill manager
    SKILL_MENU = "skill_menu"
    SKILL_BROWSE = "skill_browse"
    SKILL_INSTALL = "skill_install"
    SKILL_REMOVE = "skill_remove"
    SKILL_RESULT = "skill_result"
    SKILL_UPDATE = "skill_update"


# Screens where space is real input instead of the leader key.
SPACE_PASSTHROUGH: frozenset[Screen] = frozenset(
    {
        Screen.WELCOME,
        Screen.COMPLETE,
        Screen.ERROR,
        Screen.PROJECT_PATH,
        Screen.TRAINER_LESSON,
        Screen.TRAINER_PRACTICE,
        Screen.TRAINER_BOSS,
        Screen.SKILL_INSTALL,
        Screen.SKILL_REMOVE,
    }
)

TRAINER_SCREENS: frozenset[Screen] = frozenset(
    {
        Screen.TRAINER_MENU,
        Screen.TRAINER_LESSON,
        Screen.TRAINER_PRACTICE,
        Screen.TRAINER_BOSS,
        Screen.TRAINER_RESULT,
        Screen.TRAINER_BOSS_RESULT,
    }
)

LEARN_TOOL_SCREENS: frozenset[Screen] = frozenset(
    {Screen.LEARN_TERMINALS, Screen.LEARN_SHELLS, Screen.LEARN_WM, Screen.LEARN_NVIM}
)

# Keymap tool screen -> its category screen.
KEYMAP_CATEGORY_SCREENS: dict[Screen, Screen] = {
    Screen.KEYMAPS: Screen.KEYMAP_CATEGORY,
    Screen.KEYMAPS_TMUX: Screen.KEYMAPS_TMUX_CATEGORY,
    Screen.KEYMAPS_ZELLIJ: Screen.KEYMAPS_ZELLIJ_CATEGORY,
    Screen.KEYMAPS_GHOSTTY: Screen.KEYMAPS_GHOSTTY_CATEGORY,
}

# Category screen -> keymap tool id used by the content tables.
KEYMAP_TOOL_BY_CATEGORY: dict[Screen, str] = {
    Screen.KEYMAP_CATEGORY: "neovim",
    Screen.KEYMAPS_TMUX_CATEGORY: "tmux",
    Screen.KEYMAPS_ZELLIJ_CATEGORY: "zellij",
    Screen.KEYMAPS_GHOSTTY_CATEGORY: "ghostty",
}

KEYMAP_TOOL_BY_SCREEN: dict[Screen, str] = {
    Screen.KEYMAPS: "neovim",
    Screen.KEYMAPS_TMUX: "tmux",
    Screen.KEYMAPS_ZELLIJ: "zellij",
    Screen.KEYMAPS_GHOSTTY: "ghostty",
}

SCREEN_TITLES: dict[Screen, str] = {
    Screen.WELCOME: "Welcome to Javi.Dots Installer",
    Screen.MAIN_MENU: "Main Menu",
    Screen.LEARN_MENU: "📚 Learn & Practice",
    Screen.OS_SELECT: "Step 1: Select Your Operating System",
    Screen.TERMINAL_SELECT: "Step 2: Choose Terminal Emulator",
    Screen.FONT_SELECT: "Step 3: Install Nerd Font",
    Screen.SHELL_SELECT: "Step 4: Choose Your Shell",
    Screen.WM_SELECT: "Step 5: Choose Terminal Multiplexer",
    Screen.NVIM_SELECT: "Step 6: Neovim Configuration",
    Screen.AI_TOOLS_SELECT: "Step 7: AI Coding Tools",
    Screen.AI_FRAMEWORK_CONFIRM: "Step 8: AI Framework",
    Screen.AI_FRAMEWORK_PRESET: "Step 8: Choose Framework Preset",
    Screen.AI_FRAMEWORK_CATEGORIES: "Step 8: Select Module Categories",
    Screen.AI_FRAMEWORK_CATEGORY_ITEMS: "Step 8: Select Modules",
    Screen.GHOSTTY_WARNING: "⚠️  Ghostty Compatibility Warning",
    Screen.BACKUP_CONFIRM: "⚠️  Existing Configs Detected",
    Screen.INSTALLING: "Installing...",
    Screen.COMPLETE: "Installation Complete!",
    Screen.ERROR: "Error",
    Screen.RESTORE_BACKUP: "🔄 Restore from Backup",
    Screen.RESTORE_CONFIRM: "⚠️  Confirm Restore",
    Screen.LEARN_TERMINALS: "📚 Learn: Terminal Emulators",
    Screen.LEARN_SHELLS: "📚 Learn: Shells",
    Screen.LEARN_WM: "📚 Learn: Terminal Multiplexers",
    Screen.LEARN_NVIM: "📚 Learn: Neovim",
    Screen.KEYMAPS_MENU: "⌨️  Keymaps Reference",
    Screen.KEYMAPS: "⌨️  Neovim Keymaps",
    Screen.KEYMAP_CATEGORY: "⌨️  Neovim Keymaps",
    Screen.KEYMAPS_TMUX: "⌨️  Tmux Keymaps",
    Screen.KEYMAPS_TMUX_CATEGORY: "⌨️  Tmux Keymaps",
    Screen.KEYMAPS_ZELLIJ: "⌨️  Zellij Keymaps",
    Screen.KEYMAPS_ZELLIJ_CATEGORY: "⌨️  Zellij Keymaps",
    Screen.KEYMAPS_GHOSTTY: "⌨️  Ghostty Keymaps",
    Screen.KEYMAPS_GHOSTTY_CATEGORY: "⌨️  Ghostty Keymaps",
    Screen.LEARN_LAZYVIM: "📖 LazyVim Guide",
    Screen.LAZYVIM_TOPIC: "📖 LazyVim Guide",
    Screen.TRAINER_MENU: "🎮 Vim Trainer - Module Selection",
    Screen.TRAINER_LESSON: "🎮 Vim Trainer - Lesson",
    Screen.TRAINER_PRACTICE: "🎮 Vim Trainer - Practice",
    Screen.TRAINER_BOSS: "🎮 Vim Trainer - Boss Fight",
    Screen.TRAINER_RESULT: "🎮 Vim Trainer - Result",
    Screen.TRAINER_BOSS_RESULT: "🎮 Vim Trainer - Boss Result",
    Screen.PROJECT_PATH: "📦 Initialize Project — Path",
    Screen.PROJECT_STACK: "📦 Initialize Project — Stack",
    Screen.PROJECT_MEMORY: "📦 Initialize Project — Memory Module",
    Screen.PROJECT_OBSIDIAN_INSTALL: "📦 Initialize Project — Obsidian",
    Screen.PROJECT_ENGRAM: "📦 Initialize Project — Engram",
    Screen.PROJECT_CI: "📦 Initialize Project — CI Provider",
    Screen.PROJECT_CONFIRM: "📦 Initialize Project — Confirm",
    Screen.PROJECT_INSTALLING: "📦 Initializing Project...",
    Screen.PROJECT_RESULT: "📦 Initialize Project — Result",
    Screen.SKILL_MENU: "🎯 Skill Manager",
    Screen.SKILL_BROWSE: "🎯 Skill Manager — Browse",
    Screen.SKILL_INSTALL: "🎯 Skill Manager — Install",
    Screen.SKILL_REMOVE: "🎯 Skill Manager — Remove",
    Screen.SKILL_RESULT: "🎯 Skill Manager — Result",
    Screen.SKILL_UPDATE: "🎯 Skill Manager — Updating Catalog",
}

_STATIC_DESCRIPTIONS: dict[Screen, str] = {
    Screen.MAIN_MENU: "What would you like to do?",
    Screen.LEARN_MENU: "Explore the tools before (or after) installing them",
    Screen.TERMINAL_SELECT: "Pick the terminal emulator to install and configure",
    Screen.FONT_SELECT: "Iosevka Term Nerd Font provides the icons used by the configs",
    Screen.SHELL_SELECT: "Your default shell with plugins and prompt",
    Screen.WM_SELECT: "Split panes, sessions, and tabs inside the terminal",
    Screen.NVIM_SELECT: "Neovim with a LazyVim-based configuration",
    Screen.AI_TOOLS_SELECT: "Select the AI coding assistants to install",
    Screen.AI_FRAMEWORK_CONFIRM: "Agents, skills, hooks and commands for your AI tools",
    Screen.AI_FRAMEWORK_PRESET: "Start from a preset or pick modules one by one",
    Screen.AI_FRAMEWORK_CATEGORIES: "Enter a category to select its modules",
    Screen.GHOSTTY_WARNING: "Ghostty may not work correctly on Debian/Ubuntu",
    Screen.BACKUP_CONFIRM: "These configuration files will be overwritten",
    Screen.COMPLETE: "Restart your terminal to apply the changes",
    Screen.RESTORE_BACKUP: "Select a backup to restore",
    Screen.RESTORE_CONFIRM: "Current configs will be replaced by the backup",
    Screen.KEYMAPS_MENU: "Choose a tool to view its keymaps",
    Screen.LEARN_LAZYVIM: "Choose a topic",
    Screen.TRAINER_MENU: "Complete lessons, practice, then defeat the boss",
    Screen.PROJECT_PATH: "Enter the project directory (tab: complete, ctrl+b: browse)",
    Screen.PROJECT_MEMORY: "Choose how your AI agents remember project context",
    Screen.PROJECT_OBSIDIAN_INSTALL: "Obsidian was not found on this system",
    Screen.PROJECT_ENGRAM: "Engram adds persistent memory alongside Obsidian Brain",
    Screen.PROJECT_CI: "Choose a CI provider template",
    Screen.PROJECT_CONFIRM: "Review your choices",
    Screen.SKILL_MENU: "Manage skills from the Gentleman-Skills catalog",
    Screen.SKILL_INSTALL: "space: toggle • enter: select • esc: back",
    Screen.SKILL_REMOVE: "space: toggle • enter: select • esc: back",
}


def screen_title(screen: Screen) -> str:
    return SCREEN_TITLES.get(screen, "")


def screen_description(screen: Screen, *, os_name: str = "", stack: str = "") -> str:
    """Subtitle shown under the title; some screens interpolate detected values."""
    if screen is Screen.OS_SELECT:
        return f"Detected: {os_name}" if os_name else ""
    if screen is Screen.PROJECT_STACK:
        return f"Auto-detected: {stack}" if stack else "Could not detect the stack"
    return _STATIC_DESCRIPTIONS.get(screen, "")


__all__ = [
    "KEYMAP_CATEGORY_SCREENS",
    "KEYMAP_TOOL_BY_CATEGORY",
    "KEYMAP_TOOL_BY_SCREEN",
    "LEARN_TOOL_SCREENS",
    "SCREEN_TITLES",
    "SPACE_PASSTHROUGH",
    "Screen",
    "TRAINER_SCREENS",
    "screen_description",
    "screen_title",
]
