"""Tests for trainer answer checking, unlocks and sessions."""

from __future__ import annotations

import unittest

from dotwizard.trainer.model import (
    TRAINER_MODULES,
    GameSession,
    ModuleProgress,
    SessionMode,
    UserStats,
    find_module,
    validate_answer,
)

HORIZONTAL = TRAINER_MODULES[0]
VERTICAL = TRAINER_MODULES[1]


class ValidateAnswerTests(unittest.TestCase):
    def test_answers_are_trimmed_and_ranked(self) -> None:
        exercise = find_module("vertical").practice[0]

        first = validate_answer(exercise, " 10G ")
        alternative = validate_answer(exercise, ":10")
        wrong = validate_answer(exercise, "10j")

        self.assertEqual((first.correct, first.optimal), (True, True))
        self.assertEqual((alternative.correct, alternative.optimal), (True, False))
        self.assertFalse(wrong.correct)
        self.assertEqual(wrong.solutions, ("10G", "10gg", ":10"))

    def test_unknown_module(self) -> None:
        self.assertIsNone(find_module("registers"))


class UserStatsTests(unittest.TestCase):
    def test_streaks(self) -> None:
        stats = UserStats()
        for correct in (True, True, False, True):
            stats.record_answer(correct)

        self.assertEqual((stats.total_attempts, stats.total_correct), (4, 3))
        self.assertEqual((stats.current_streak, stats.best_streak), (1, 2))

    def test_unlock_chain(self) -> None:
        stats = UserStats()

        self.assertTrue(stats.is_module_unlocked("horizontal"))
        self.assertFalse(stats.is_module_unlocked("vertical"))
        self.assertFalse(stats.is_module_unlocked("nope"))

        stats.progress("horizontal").boss_defeated = True
        self.assertTrue(stats.is_module_unlocked("vertical"))

    def test_practice_and_boss_gates(self) -> None:
        stats = UserStats()
        self.assertFalse(stats.is_practice_ready(HORIZONTAL))

        progress = stats.progress("horizontal")
        progress.lessons_completed = len(HORIZONTAL.lessons)
        self.assertTrue(stats.is_practice_ready(HORIZONTAL))
        self.assertFalse(stats.is_boss_ready(HORIZONTAL))

        for correct in (True, True, True, True, False):
            progress.record_practice("hp-1", correct)
        self.assertAlmostEqual(progress.practice_accuracy, 0.8)
        self.assertTrue(stats.is_boss_ready(HORIZONTAL))


class ModuleProgressTests(unittest.TestCase):
    def test_mastered_is_unique_and_reset_clears(self) -> None:
        progress = ModuleProgress()
        progress.record_practice("hp-1", True)
        progress.record_practice("hp-1", True)
        progress.record_practice("hp-2", False)

        self.assertEqual(progress.mastered, ["hp-1"])
        self.assertEqual((progress.practice_attempts, progress.practice_correct), (3, 2))

        progress.reset_practice()
        self.assertEqual((progress.practice_attempts, progress.mastered), (0, []))
        self.assertEqual(progress.practice_accuracy, 0.0)


class GameSessionTests(unittest.TestCase):
    def test_lesson_resumes_or_replays(self) -> None:
        resumed = GameSession.lesson(HORIZONTAL, ModuleProgress(lessons_completed=2))
        replay = GameSession.lesson(HORIZONTAL, ModuleProgress(lessons_completed=4))

        self.assertEqual(resumed.current.id, "h-3")
        self.assertEqual(replay.index, 0)
        self.assertIs(resumed.mode, SessionMode.LESSON)

    def test_practice_puts_unmastered_first(self) -> None:
        session = GameSession.practice(HORIZONTAL, ModuleProgress(mastered=["hp-1", "hp-3"]))

        self.assertEqual([ex.id for ex in session.exercises], ["hp-2", "hp-4", "hp-1", "hp-3"])

    def test_boss_fight_runs_to_completion(self) -> None:
        session = GameSession.boss_fight(VERTICAL)

        self.assertEqual(session.lives, 3)
        self.assertEqual(session.module.boss.name, "The Scroll Keeper")
        self.assertTrue(session.advance())
        self.assertTrue(session.advance())
        self.assertFalse(session.advance())
        self.assertTrue(session.finished)
        self.assertIsNone(session.current)


if __name__ == "__main__":
    unittest.main()
