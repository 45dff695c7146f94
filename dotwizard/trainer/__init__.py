"""Vim trainer: modules, sessions, and persisted stats."""

from __future__ import annotations

from .model import (
    TRAINER_MODULES,
    GameSession,
    ModuleProgress,
    SessionMode,
    TrainerModule,
    UserStats,
    find_module,
    validate_answer,
)
from .stats import load_stats, save_stats

__all__ = [
    "GameSession",
    "ModuleProgress",
    "SessionMode",
    "TRAINER_MODULES",
    "TrainerModule",
    "UserStats",
    "find_module",
    "load_stats",
    "save_stats",
    "validate_answer",
]
