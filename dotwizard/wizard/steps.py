"""Install step plan derived from ``UserChoices`` and the detected system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..services.system import OS_MAC, SystemInfo
from .choices import UserChoices


class StepStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class InstallStep:
    id: str
    name: str
    description: str
    status: StepStatus = StepStatus.PENDING
    interactive: bool = False
    error: str = ""


def build_install_steps(
    choices: UserChoices,
    system: SystemInfo,
    existing_configs: list[str],
) -> list[InstallStep]:
    steps: list[InstallStep] = []
    if choices.create_backup and existing_configs:
        steps.append(InstallStep("backup", "Backup Configs", "Saving existing configurations"))

    steps.append(InstallStep("clone", "Clone Repository", "Downloading Javi.Dots"))

    is_termux = choices.os == "termux" or system.is_termux
    if not system.has_brew and not is_termux:
        steps.append(InstallStep("homebrew", "Install Homebrew", "Package manager", interactive=True))

    if choices.os == "linux" and not is_termux:
        steps.append(InstallStep("deps", "Install Dependencies", "Base packages", interactive=True))
    elif is_termux:
        steps.append(InstallStep("deps", "Install Dependencies", "Base packages (pkg)"))
    elif choices.os == OS_MAC and not system.has_xcode:
        steps.append(InstallStep("xcode", "Install Xcode CLI", "Developer tools"))

    if choices.terminal and choices.terminal != "none":
        steps.append(
            InstallStep(
                "terminal",
                f"Install {choices.terminal}",
                "Terminal emulator",
                interactive=choices.os == "linux",
            )
        )

    if choices.install_font:
        steps.append(InstallStep("font", "Install Iosevka Nerd Font", "Nerd font with icons"))

    steps.append(InstallStep("shell", f"Install {choices.shell}", "Shell and plugins"))

    if choices.window_manager and choices.window_manager != "none":
        steps.append(InstallStep("wm", f"Install {choices.window_manager}", "Terminal multiplexer"))

    if choices.install_nvim:
        steps.append(InstallStep("nvim", "Install Neovim", "Editor with config"))

    if choices.ai_tools:
        steps.append(InstallStep("aitools", "Install AI Tools", " + ".join(choices.ai_tools)))

    if choices.install_ai_framework:
        preset = choices.ai_framework_preset or "custom"
        steps.append(InstallStep("aiframework", "Install AI Framework", f"Preset: {preset}"))

    steps.append(
        InstallStep("setshell", "Set Default Shell", "Configure default shell", interactive=True)
    )
    steps.append(InstallStep("cleanup", "Cleanup", "Removing temporary files"))
    return steps


__all__ = ["InstallStep", "StepStatus", "build_install_steps"]
