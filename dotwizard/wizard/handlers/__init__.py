"""Per-screen key handlers.

``HANDLERS`` maps every screen to ``handler(state, key) -> Effect | None``.
Handlers run on the cloned state and mutate it in place.
"""

from __future__ import annotations

from ..screens import Screen
from . import install, learn, menus, project, restore, skills, trainer
from .common import Handler

HANDLERS: dict[Screen, Handler] = {}
for _module in (menus, install, restore, learn, project, skills, trainer):
    HANDLERS.update(_module.HANDLERS)
del _module

__all__ = ["HANDLERS", "install", "learn", "menus", "project", "restore", "skills", "trainer"]
