"""Accretive record of confirmed wizard decisions.

Install and project collaborators read ``UserChoices`` as their only input.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class UserChoices:
    os: str = ""
    terminal: str = ""
    install_font: bool = False
    shell: str = ""
    window_manager: str = ""
    install_nvim: bool = False
    create_backup: bool = False
    ai_tools: list[str] = field(default_factory=list)
    install_ai_framework: bool = False
    ai_framework_preset: str = ""
    ai_framework_modules: list[str] = field(default_factory=list)
    install_agent_teams_lite: bool = False
    # Project init
    init_project: bool = False
    project_path: str = ""
    project_stack: str = ""
    project_memory: str = ""
    project_ci: str = ""
    project_engram: bool = False
    install_obsidian: bool = False

    def reset_project(self) -> None:
        """Clear every project-init field before a fresh project flow."""
        self.init_project = False
        self.project_path = ""
        self.project_stack = ""
        self.project_memory = ""
        self.project_ci = ""
        self.project_engram = False
        self.install_obsidian = False


__all__ = ["UserChoices"]
