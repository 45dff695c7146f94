"""Screen state machine: state, messages, effects and ``update``."""

from __future__ import annotations

from .choices import UserChoices
from .messages import Effect, KeyPressed, Message, Resize, Tagged, Tick
from .navigation import NavigationContext, go_back, predecessor_of
from .screens import Screen, screen_description, screen_title
from .state import WizardState
from .steps import InstallStep, StepStatus, build_install_steps
from .update import update

__all__ = [
    "Effect",
    "InstallStep",
    "KeyPressed",
    "Message",
    "NavigationContext",
    "Resize",
    "Screen",
    "StepStatus",
    "Tagged",
    "Tick",
    "UserChoices",
    "WizardState",
    "build_install_steps",
    "go_back",
    "predecessor_of",
    "screen_description",
    "screen_title",
    "update",
]
