"""Trainer statistics persisted as JSON in the user data directory.

Loading is defensive in the same way as the app config: a missing or
malformed file yields fresh stats.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_data_dir

from .model import ModuleProgress, UserStats

logger = logging.getLogger(__name__)

APP_NAME = "dotwizard"
STATS_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / "trainer_stats.json"


def _nonnegative_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def stats_to_dict(stats: UserStats) -> dict[str, object]:
    return {
        "total_attempts": stats.total_attempts,
        "total_correct": stats.total_correct,
        "current_streak": stats.current_streak,
        "best_streak": stats.best_streak,
        "modules": {
            module_id: {
                "lessons_completed": progress.lessons_completed,
                "practice_attempts": progress.practice_attempts,
                "practice_correct": progress.practice_correct,
                "mastered": list(progress.mastered),
                "boss_defeated": progress.boss_defeated,
            }
            for module_id, progress in stats.modules.items()
        },
    }


def stats_from_dict(data: dict[str, object]) -> UserStats:
    stats = UserStats(
        total_attempts=_nonnegative_int(data.get("total_attempts")),
        total_correct=_nonnegative_int(data.get("total_correct")),
        current_streak=_nonnegative_int(data.get("current_streak")),
        best_streak=_nonnegative_int(data.get("best_streak")),
    )
    modules = data.get("modules")
    if not isinstance(modules, dict):
        return stats
    for module_id, raw in modules.items():
        if not isinstance(module_id, str) or not isinstance(raw, dict):
            continue
        mastered = raw.get("mastered")
        stats.modules[module_id] = ModuleProgress(
            lessons_completed=_nonnegative_int(raw.get("lessons_completed")),
            practice_attempts=_nonnegative_int(raw.get("practice_attempts")),
            practice_correct=_nonnegative_int(raw.get("practice_correct")),
            mastered=[item for item in mastered if isinstance(item, str)] if isinstance(mastered, list) else [],
            boss_defeated=raw.get("boss_defeated") is True,
        )
    return stats


def load_stats(path: Path | None = None) -> UserStats:
    target = path if path is not None else STATS_PATH
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except Exception:
        return UserStats()
    if not isinstance(data, dict):
        return UserStats()
    return stats_from_dict(data)


def save_stats(stats: UserStats, path: Path | None = None) -> None:
    target = path if path is not None else STATS_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(stats_to_dict(stats), indent=2) + "\n", encoding="utf-8")
    except OSError:
        logger.warning("could not save trainer stats to %s", target, exc_info=True)


__all__ = ["STATS_PATH", "load_stats", "save_stats", "stats_from_dict", "stats_to_dict"]
