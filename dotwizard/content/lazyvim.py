"""LazyVim guide topics. Code samples are Lua and rendered highlighted."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LazyVimTopic:
    title: str
    description: str
    body: tuple[str, ...] = ()
    code: str = ""
    code_language: str = "lua"


LAZYVIM_TOPICS: tuple[LazyVimTopic, ...] = (
    LazyVimTopic(
        "What is LazyVim?",
        "A Neovim setup powered by lazy.nvim",
        (
            "LazyVim ships sane defaults, a curated plugin set and lazy loading.",
            "Your own config lives in ~/.config/nvim/lua/config and lua/plugins.",
            "Anything you add there is merged on top of the defaults.",
        ),
    ),
    LazyVimTopic(
        "Adding plugins",
        "Drop a spec file into lua/plugins/",
        (
            "Every file in lua/plugins returns a list of plugin specs.",
            "lazy.nvim installs missing plugins on the next start.",
        ),
        code=(
            "return {\n"
            "  {\n"
            '    "folke/trouble.nvim",\n'
            '    cmd = "Trouble",\n'
            "    opts = { use_diagnostic_signs = true },\n"
            "  },\n"
            "}\n"
        ),
    ),
    LazyVimTopic(
        "Overriding options",
        "Change defaults in lua/config/options.lua",
        ("Options run before plugins load.",),
        code=(
            "vim.opt.relativenumber = true\n"
            "vim.opt.scrolloff = 8\n"
            "vim.g.autoformat = false\n"
        ),
    ),
    LazyVimTopic(
        "Custom keymaps",
        "Add mappings in lua/config/keymaps.lua",
        ("Keymaps load on the VeryLazy event.",),
        code=(
            'local map = vim.keymap.set\n'
            'map("n", "<leader>w", "<cmd>w<cr>", { desc = "Save" })\n'
            'map("i", "jk", "<esc>", { desc = "Exit insert mode" })\n'
        ),
    ),
    LazyVimTopic(
        "Extras",
        "Enable language packs with :LazyExtras",
        (
            "Extras bundle LSP, formatter and Treesitter setup per language.",
            "Toggle them with x in the :LazyExtras window.",
        ),
        code=(
            "return {\n"
            '  { import = "lazyvim.plugins.extras.lang.typescript" },\n'
            '  { import = "lazyvim.plugins.extras.lang.go" },\n'
            "}\n"
        ),
    ),
)


__all__ = ["LAZYVIM_TOPICS", "LazyVimTopic"]
