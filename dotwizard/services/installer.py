"""Install-step execution.

``StepRunner.plan`` turns one step id plus the user's choices into a list of
actions: external commands and config copies out of the cloned dotfiles
repository. ``StepRunner.run`` executes that plan, streaming command output
through ``emit``. Interactive steps run attached to the terminal instead and
are expected to be called while the TUI is suspended.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_cache_dir

from ..wizard.choices import UserChoices
from ..wizard.steps import InstallStep
from .backups import create_backup
from .process import CommandError, Emit, describe, run_attached, stream_command
from .system import OS_ARCH, OS_DEBIAN, OS_FEDORA, OS_MAC, OS_TERMUX, SystemInfo

logger = logging.getLogger(__name__)

APP_NAME = "dotwizard"
DOTFILES_REPO = "https://github.com/Gentleman-Programming/Gentleman.Dots.git"
CACHE_DIR = Path(user_cache_dir(APP_NAME, appauthor=False))
HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
FONT_ZIP_URL = "https://github.com/ryanoasis/nerd-fonts/releases/latest/download/IosevkaTerm.zip"
FONT_TTF_URL = (
    "https://github.com/ryanoasis/nerd-fonts/raw/HEAD/patched-fonts/IosevkaTerm/"
    "IosevkaTermNerdFont-Regular.ttf"
)

# Config sources inside the dotfiles checkout -> destination under $HOME.
TERMINAL_CONFIGS = {
    "alacritty": ("alacritty.toml", ".config/alacritty/alacritty.toml"),
    "wezterm": (".wezterm.lua", ".wezterm.lua"),
    "kitty": ("GentlemanKitty", ".config/kitty"),
    "ghostty": ("GentlemanGhostty", ".config/ghostty"),
}
SHELL_CONFIGS = {
    "fish": ("GentlemanFish/fish", ".config/fish"),
    "zsh": (".zshrc", ".zshrc"),
    "nushell": ("GentlemanNushell", ".config/nushell"),
}
WM_CONFIGS = {
    "tmux": ("GentlemanTmux/.tmux.conf", ".tmux.conf"),
    "zellij": ("GentlemanZellij/zellij", ".config/zellij"),
}
NVIM_CONFIG = ("GentlemanNvim/nvim", ".config/nvim")

SHELL_PACKAGES = {"fish": "fish", "zsh": "zsh", "nushell": "nushell"}
SHELL_BINARIES = {"fish": "fish", "zsh": "zsh", "nushell": "nu"}

AI_TOOL_COMMANDS: dict[str, tuple[str, ...]] = {
    "claude": ("bash", "-c", "curl -fsSL https://claude.ai/install.sh | bash"),
    "opencode": ("bash", "-c", "curl -fsSL https://opencode.ai/install | bash"),
    "gemini": ("npm", "install", "-g", "@google/gemini-cli"),
    "copilot": ("npm", "install", "-g", "@github/copilot"),
    "codex": ("npm", "install", "-g", "@openai/codex"),
}


class StepError(Exception):
    """An install step failed; the message is shown on the error screen."""

    def __init__(self, step_id: str, message: str) -> None:
        super().__init__(message)
        self.step_id = step_id


@dataclass(frozen=True)
class Command:
    argv: tuple[str, ...]
    cwd: str | None = None

    def __str__(self) -> str:
        return describe(self.argv)


@dataclass(frozen=True)
class CopyConfig:
    """Copy ``source`` (inside the checkout) over ``target`` (under $HOME)."""

    source: str
    target: str

    def __str__(self) -> str:
        return f"copy {self.source} -> ~/{self.target}"


Action = Command | CopyConfig


class StepRunner:
    """Executes install steps for one host."""

    def __init__(
        self,
        system: SystemInfo,
        home: Path,
        *,
        dry_run: bool = False,
        repo_url: str = DOTFILES_REPO,
        cache_dir: Path | None = None,
        backup_root: Path | None = None,
    ) -> None:
        self.system = system
        self.home = home
        self.dry_run = dry_run
        self.repo_url = repo_url
        self.cache_dir = cache_dir if cache_dir is not None else CACHE_DIR
        self.backup_root = backup_root

    @property
    def checkout_dir(self) -> Path:
        return self.cache_dir / "Gentleman.Dots"

    @property
    def download_dir(self) -> Path:
        return self.cache_dir / "downloads"

    # Planning

    def _is_termux(self, choices: UserChoices) -> bool:
        return self.system.is_termux or choices.os == OS_TERMUX

    def _system_install(self, choices: UserChoices, packages: Sequence[str]) -> list[Command]:
        """Native package-manager install for base dependencies."""
        names = tuple(packages)
        if self._is_termux(choices):
            return [Command(("pkg", "install", "-y", *names))]
        if choices.os == OS_MAC:
            return [Command(("brew", "install", *names))]
        distro = self.system.os
        if distro == OS_ARCH:
            return [Command(("sudo", "pacman", "-S", "--needed", "--noconfirm", *names))]
        if distro == OS_FEDORA:
            return [Command(("sudo", "dnf", "install", "-y", *names))]
        if distro == OS_DEBIAN:
            return [
                Command(("sudo", "apt-get", "update")),
                Command(("sudo", "apt-get", "install", "-y", *names)),
            ]
        return [Command(("brew", "install", *names))]

    def _brew_install(self, choices: UserChoices, packages: Sequence[str]) -> list[Command]:
        if self._is_termux(choices):
            return [Command(("pkg", "install", "-y", *packages))]
        return [Command(("brew", "install", *packages))]

    def _deps(self, choices: UserChoices) -> list[Action]:
        if self._is_termux(choices):
            return [
                Command(("pkg", "update", "-y")),
                Command(("pkg", "install", "-y", "git", "curl", "unzip", "nodejs")),
            ]
        distro = self.system.os
        if distro == OS_ARCH:
            packages = ("base-devel", "curl", "file", "git", "unzip")
        elif distro == OS_FEDORA:
            packages = ("gcc", "make", "curl", "file", "git", "unzip")
        else:
            packages = ("build-essential", "curl", "file", "git", "unzip")
        return list(self._system_install(choices, packages))

    def _terminal(self, choices: UserChoices) -> list[Action]:
        terminal = choices.terminal
        actions: list[Action] = []
        if choices.os == OS_MAC:
            actions.append(Command(("brew", "install", "--cask", terminal)))
        else:
            actions.extend(self._system_install(choices, (terminal,)))
        config = TERMINAL_CONFIGS.get(terminal)
        if config is not None:
            actions.append(CopyConfig(*config))
        return actions

    def _font(self, choices: UserChoices) -> list[Action]:
        if self._is_termux(choices):
            target = self.home / ".termux" / "font.ttf"
            return [Command(("curl", "-fsSLo", str(target), "--create-dirs", FONT_TTF_URL))]
        if choices.os == OS_MAC:
            return [Command(("brew", "install", "--cask", "font-iosevka-term-nerd-font"))]
        archive = self.download_dir / "IosevkaTerm.zip"
        fonts = self.home / ".local" / "share" / "fonts"
        return [
            Command(("curl", "-fsSLo", str(archive), "--create-dirs", FONT_ZIP_URL)),
            Command(("unzip", "-o", "-q", str(archive), "-d", str(fonts))),
            Command(("fc-cache", "-f")),
        ]

    def _shell(self, choices: UserChoices) -> list[Action]:
        package = SHELL_PACKAGES.get(choices.shell, choices.shell)
        actions: list[Action] = list(self._brew_install(choices, (package, "starship")))
        config = SHELL_CONFIGS.get(choices.shell)
        if config is not None:
            actions.append(CopyConfig(*config))
        return actions

    def _wm(self, choices: UserChoices) -> list[Action]:
        actions: list[Action] = list(self._brew_install(choices, (choices.window_manager,)))
        config = WM_CONFIGS.get(choices.window_manager)
        if config is not None:
            actions.append(CopyConfig(*config))
        return actions

    def _nvim(self, choices: UserChoices) -> list[Action]:
        actions: list[Action] = list(
            self._brew_install(choices, ("neovim", "ripgrep", "fd", "lazygit"))
        )
        actions.append(CopyConfig(*NVIM_CONFIG))
        return actions

    def _ai_framework(self, choices: UserChoices) -> list[Action]:
        script = str(self.checkout_dir / "scripts" / "setup-ai-framework.sh")
        argv = ["bash", script]
        if choices.ai_framework_preset:
            argv += ["--preset", choices.ai_framework_preset]
        else:
            argv += ["--modules", ",".join(choices.ai_framework_modules)]
        if choices.install_agent_teams_lite:
            argv.append("--agent-teams-lite")
        if choices.ai_tools:
            argv += ["--tools", ",".join(choices.ai_tools)]
        return [Command(tuple(argv))]

    def _set_shell(self, choices: UserChoices) -> list[Action]:
        binary = SHELL_BINARIES.get(choices.shell, choices.shell)
        if self._is_termux(choices):
            return [Command(("chsh", "-s", binary))]
        path = shutil.which(binary) or f"/bin/{binary}"
        return [Command(("chsh", "-s", path))]

    def plan(self, step_id: str, choices: UserChoices) -> list[Action]:
        """Actions for ``step_id``; ``[]`` for steps handled in Python."""
        if step_id == "clone":
            if (self.checkout_dir / ".git").is_dir():
                return [Command(("git", "-C", str(self.checkout_dir), "pull", "--ff-only"))]
            return [Command(("git", "clone", "--depth", "1", self.repo_url, str(self.checkout_dir)))]
        if step_id == "homebrew":
            script = f'script="$(curl -fsSL {HOMEBREW_INSTALL_URL})" && /bin/bash -c "$script"'
            return [Command(("/bin/bash", "-c", script))]
        if step_id == "deps":
            return self._deps(choices)
        if step_id == "xcode":
            return [Command(("xcode-select", "--install"))]
        if step_id == "terminal":
            return self._terminal(choices)
        if step_id == "font":
            return self._font(choices)
        if step_id == "shell":
            return self._shell(choices)
        if step_id == "wm":
            return self._wm(choices)
        if step_id == "nvim":
            return self._nvim(choices)
        if step_id == "aitools":
            return [Command(AI_TOOL_COMMANDS[tool]) for tool in choices.ai_tools if tool in AI_TOOL_COMMANDS]
        if step_id == "aiframework":
            return self._ai_framework(choices)
        if step_id == "setshell":
            return self._set_shell(choices)
        if step_id in ("backup", "cleanup"):
            return []
        raise StepError(step_id, f"unknown install step: {step_id}")

    # Execution

    def _copy_config(self, step_id: str, action: CopyConfig, emit: Emit) -> None:
        source = self.checkout_dir / action.source
        target = self.home / action.target
        emit(f"Copying {action.source} -> ~/{action.target}")
        if self.dry_run:
            logger.info("dry-run: %s", action)
            return
        if not source.exists():
            raise StepError(step_id, f"config not found in checkout: {action.source}")
        if target.is_symlink() or target.is_file():
            target.unlink()
        elif target.is_dir():
            shutil.rmtree(target)
        target.parent.mkdir(parents=True, exist_ok=True)
        if source.is_dir():
            shutil.copytree(source, target, symlinks=True)
        else:
            shutil.copy2(source, target)

    def _backup(self, existing_configs: Sequence[str], emit: Emit) -> None:
        if self.dry_run:
            emit(f"Would back up {len(existing_configs)} items")
            return
        info = create_backup(self.home, list(existing_configs), root=self.backup_root)
        emit(f"Backed up {len(info.files)} items to {info.path}")

    def _cleanup(self, emit: Emit) -> None:
        emit("Removing temporary downloads")
        if self.dry_run or not self.download_dir.exists():
            return
        shutil.rmtree(self.download_dir, ignore_errors=True)

    def run(
        self,
        step: InstallStep,
        choices: UserChoices,
        emit: Emit,
        existing_configs: Sequence[str] = (),
    ) -> None:
        """Execute ``step``; raise ``StepError`` on the first failing action."""
        logger.info("step %s started (interactive=%s)", step.id, step.interactive)
        try:
            if step.id == "backup":
                self._backup(existing_configs, emit)
            elif step.id == "cleanup":
                self._cleanup(emit)
            else:
                if step.id == "clone" and not self.dry_run:
                    self.cache_dir.mkdir(parents=True, exist_ok=True)
                for action in self.plan(step.id, choices):
                    if isinstance(action, CopyConfig):
                        self._copy_config(step.id, action, emit)
                    elif step.interactive:
                        run_attached(action.argv, cwd=action.cwd, dry_run=self.dry_run)
                    else:
                        stream_command(action.argv, emit, cwd=action.cwd, dry_run=self.dry_run)
        except CommandError as exc:
            raise StepError(step.id, str(exc)) from exc
        except OSError as exc:
            raise StepError(step.id, str(exc)) from exc
        logger.info("step %s finished", step.id)


__all__ = [
    "AI_TOOL_COMMANDS",
    "Action",
    "Command",
    "CopyConfig",
    "DOTFILES_REPO",
    "StepError",
    "StepRunner",
]
