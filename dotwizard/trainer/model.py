"""Vim trainer content and game rules.

A module has lessons, a practice pool, and a boss. Lessons unlock practice;
practice accuracy of at least 80% unlocks the boss; beating a boss unlocks
the next module.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

BOSS_LIVES = 3
BOSS_UNLOCK_ACCURACY = 0.8


@dataclass(frozen=True)
class Exercise:
    id: str
    prompt: str
    code: str
    solutions: tuple[str, ...]
    hint: str = ""

    @property
    def optimal(self) -> str:
        return self.solutions[0] if self.solutions else ""


@dataclass(frozen=True)
class Boss:
    name: str
    steps: tuple[Exercise, ...]
    lives: int = BOSS_LIVES


@dataclass(frozen=True)
class TrainerModule:
    id: str
    name: str
    icon: str
    description: str
    lessons: tuple[Exercise, ...]
    practice: tuple[Exercise, ...]
    boss: Boss


def _ex(id: str, prompt: str, code: str, solutions: tuple[str, ...], hint: str = "") -> Exercise:
    return Exercise(id, prompt, code, solutions, hint)


TRAINER_MODULES: tuple[TrainerModule, ...] = (
    TrainerModule(
        "horizontal",
        "Horizontal Movement",
        "↔️",
        "Move within a line: h l w b e 0 $ f t",
        lessons=(
            _ex("h-1", "Move to the start of the next word", "█hello world", ("w",), "w jumps forward by word"),
            _ex("h-2", "Move to the end of the line", "█const value = 42;", ("$",), "$ is end of line"),
            _ex("h-3", "Move to the first column", "const █value = 42;", ("0",), "0 is column zero"),
            _ex("h-4", "Jump onto the next '='", "█const value = 42;", ("f=",), "f<char> finds a character"),
        ),
        practice=(
            _ex("hp-1", "Go back one word", "hello █world", ("b",), "b is back by word"),
            _ex("hp-2", "Go to the end of the word", "█hello world", ("e",), "e is end of word"),
            _ex("hp-3", "Stop just before ';'", "█let x = 1;", ("t;",), "t<char> stops before it"),
            _ex("hp-4", "First non-blank character", "    █  return x", ("^",), "^ skips indentation"),
        ),
        boss=Boss(
            "The Line Warden",
            (
                _ex("hb-1", "Reach the end of the line", "█return a + b;", ("$",)),
                _ex("hb-2", "Jump to the '+'", "█return a + b;", ("f+",)),
                _ex("hb-3", "Back to the first column", "return a + █b;", ("0",)),
            ),
        ),
    ),
    TrainerModule(
        "vertical",
        "Vertical Movement",
        "↕️",
        "Move between lines: j k gg G { } ctrl-d ctrl-u",
        lessons=(
            _ex("v-1", "Go to the first line of the file", "line 40 █", ("gg",), "gg is top of file"),
            _ex("v-2", "Go to the last line of the file", "█line 1", ("G",), "G is bottom of file"),
            _ex("v-3", "Jump to the next blank line", "█paragraph", ("}",), "} is next paragraph"),
        ),
        practice=(
            _ex("vp-1", "Go to line 10", "█line 1", ("10G", "10gg", ":10"), "<n>G jumps to line n"),
            _ex("vp-2", "Jump to the previous blank line", "paragraph █", ("{",), "{ is previous paragraph"),
            _ex("vp-3", "Move down three lines", "█line 1", ("3j",), "a count repeats a motion"),
        ),
        boss=Boss(
            "The Scroll Keeper",
            (
                _ex("vb-1", "Top of the file", "line 99 █", ("gg",)),
                _ex("vb-2", "Line 25", "█line 1", ("25G", "25gg", ":25")),
                _ex("vb-3", "End of the file", "█line 25", ("G",)),
            ),
        ),
    ),
    TrainerModule(
        "textobjects",
        "Text Objects",
        "🎯",
        "Operate on words, quotes, and brackets: ciw di\" ya( ...",
        lessons=(
            _ex("t-1", "Change the word under the cursor", "hel█lo world", ("ciw",), "c + iw (inner word)"),
            _ex("t-2", "Delete inside the quotes", 'say "hel█lo"', ('di"',), 'd + i" (inner quotes)'),
            _ex("t-3", "Yank the parentheses and contents", "call(a, █b)", ("ya(", "yab"), "y + a( (around parens)"),
        ),
        practice=(
            _ex("tp-1", "Delete the word and its space", "one █two three", ("daw",), "aw includes whitespace"),
            _ex("tp-2", "Change inside braces", "{ ret█urn 1 }", ("ci{", "ciB"), "i{ is inner braces"),
            _ex("tp-3", "Delete inside brackets", "[1, █2, 3]", ("di[",), "i[ is inner brackets"),
        ),
        boss=Boss(
            "The Bracket Hydra",
            (
                _ex("tb-1", "Change inside the quotes", 'log("█oops")', ('ci"',)),
                _ex("tb-2", "Delete the argument list with parens", "fn(█a, b)", ("da(", "dab")),
                _ex("tb-3", "Change the word", "let █value", ("ciw",)),
            ),
        ),
    ),
)


def find_module(module_id: str) -> TrainerModule | None:
    for module in TRAINER_MODULES:
        if module.id == module_id:
            return module
    return None


@dataclass(frozen=True)
class Validation:
    correct: bool
    optimal: bool
    solutions: tuple[str, ...]


def validate_answer(exercise: Exercise, answer: str) -> Validation:
    """Compare a trimmed answer against the accepted solutions."""
    attempt = answer.strip()
    correct = attempt in exercise.solutions
    return Validation(correct, correct and attempt == exercise.optimal, exercise.solutions)


@dataclass
class ModuleProgress:
    lessons_completed: int = 0
    practice_attempts: int = 0
    practice_correct: int = 0
    mastered: list[str] = field(default_factory=list)
    boss_defeated: bool = False

    @property
    def practice_accuracy(self) -> float:
        if self.practice_attempts == 0:
            return 0.0
        return self.practice_correct / self.practice_attempts

    def record_practice(self, exercise_id: str, correct: bool) -> None:
        self.practice_attempts += 1
        if correct:
            self.practice_correct += 1
            if exercise_id not in self.mastered:
                self.mastered.append(exercise_id)

    def reset_practice(self) -> None:
        self.practice_attempts = 0
        self.practice_correct = 0
        self.mastered = []


@dataclass
class UserStats:
    modules: dict[str, ModuleProgress] = field(default_factory=dict)
    total_attempts: int = 0
    total_correct: int = 0
    current_streak: int = 0
    best_streak: int = 0

    def progress(self, module_id: str) -> ModuleProgress:
        return self.modules.setdefault(module_id, ModuleProgress())

    def record_answer(self, correct: bool) -> None:
        self.total_attempts += 1
        if correct:
            self.total_correct += 1
            self.current_streak += 1
            self.best_streak = max(self.best_streak, self.current_streak)
        else:
            self.current_streak = 0

    def is_module_unlocked(self, module_id: str) -> bool:
        """The first module is always open; later ones need the previous boss."""
        for index, module in enumerate(TRAINER_MODULES):
            if module.id != module_id:
                continue
            if index == 0:
                return True
            previous = self.modules.get(TRAINER_MODULES[index - 1].id)
            return previous is not None and previous.boss_defeated
        return False

    def is_practice_ready(self, module: TrainerModule) -> bool:
        progress = self.modules.get(module.id)
        return progress is not None and progress.lessons_completed >= len(module.lessons) > 0

    def is_boss_ready(self, module: TrainerModule) -> bool:
        if not self.is_practice_ready(module):
            return False
        return self.progress(module.id).practice_accuracy >= BOSS_UNLOCK_ACCURACY


class SessionMode(Enum):
    LESSON = "lesson"
    PRACTICE = "practice"
    BOSS = "boss"


@dataclass
class GameSession:
    """One run through a module's lessons, practice pool, or boss."""

    module_id: str
    mode: SessionMode
    exercises: list[Exercise]
    index: int = 0
    lives: int = BOSS_LIVES
    correct: int = 0

    @property
    def module(self) -> TrainerModule:
        module = find_module(self.module_id)
        if module is None:
            raise KeyError(self.module_id)
        return module

    @property
    def current(self) -> Exercise | None:
        if 0 <= self.index < len(self.exercises):
            return self.exercises[self.index]
        return None

    @property
    def finished(self) -> bool:
        return self.index >= len(self.exercises)

    def advance(self) -> bool:
        """Move to the next exercise; ``False`` once the run is over."""
        self.index += 1
        return not self.finished

    @classmethod
    def lesson(cls, module: TrainerModule, progress: ModuleProgress) -> GameSession:
        """Resume at the first unfinished lesson, or replay from the start."""
        start = progress.lessons_completed
        if start >= len(module.lessons):
            start = 0
        return cls(module.id, SessionMode.LESSON, list(module.lessons), index=start)

    @classmethod
    def practice(cls, module: TrainerModule, progress: ModuleProgress) -> GameSession:
        """Unmastered exercises first, then the rest of the pool."""
        pending = [ex for ex in module.practice if ex.id not in progress.mastered]
        done = [ex for ex in module.practice if ex.id in progress.mastered]
        return cls(module.id, SessionMode.PRACTICE, pending + done)

    @classmethod
    def boss_fight(cls, module: TrainerModule) -> GameSession:
        return cls(module.id, SessionMode.BOSS, list(module.boss.steps), lives=module.boss.lives)


__all__ = [
    "BOSS_LIVES",
    "BOSS_UNLOCK_ACCURACY",
    "Boss",
    "Exercise",
    "GameSession",
    "ModuleProgress",
    "SessionMode",
    "TRAINER_MODULES",
    "TrainerModule",
    "UserStats",
    "Validation",
    "find_module",
    "validate_answer",
]
