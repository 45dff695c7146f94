"""Tests for trainer stats persistence."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from dotwizard.trainer.model import ModuleProgress, UserStats
from dotwizard.trainer.stats import load_stats, save_stats, stats_from_dict


class TrainerStatsPersistenceTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "trainer_stats.json"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_missing_or_malformed_file_gives_fresh_stats(self) -> None:
        self.assertEqual(load_stats(self.path), UserStats())

        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        self.assertEqual(load_stats(self.path), UserStats())

        self.path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(load_stats(self.path), UserStats())

    def test_save_then_load(self) -> None:
        stats = UserStats(total_attempts=5, total_correct=4, best_streak=3)
        stats.modules["horizontal"] = ModuleProgress(
            lessons_completed=4,
            practice_attempts=5,
            practice_correct=4,
            mastered=["hp-1"],
            boss_defeated=True,
        )

        save_stats(stats, self.path)

        self.assertEqual(load_stats(self.path), stats)
        on_disk = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(on_disk["modules"]["horizontal"]["mastered"], ["hp-1"])

    def test_bad_values_are_coerced(self) -> None:
        stats = stats_from_dict(
            {
                "total_attempts": -4,
                "best_streak": True,
                "current_streak": "7",
                "modules": {
                    "horizontal": {
                        "lessons_completed": 2,
                        "mastered": ["hp-1", 3],
                        "boss_defeated": "yes",
                    },
                    "vertical": "corrupt",
                },
            }
        )

        self.assertEqual((stats.total_attempts, stats.best_streak, stats.current_streak), (0, 0, 0))
        self.assertEqual(list(stats.modules), ["horizontal"])
        progress = stats.modules["horizontal"]
        self.assertEqual(progress.mastered, ["hp-1"])
        self.assertFalse(progress.boss_defeated)
        self.assertEqual(progress.lessons_completed, 2)


if __name__ == "__main__":
    unittest.main()
