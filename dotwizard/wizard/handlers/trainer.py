"""Vim trainer screens.

Game input is free text: printable runes and space append, a few control
chords append their control character, backspace deletes the last rune.
Every path out of a game screen hands the stats to the persistence effect.
"""

from __future__ import annotations

from ...input.keys import BACKSPACE, ENTER, SPACE, TAB, Key, is_down, is_up
from ...trainer.model import TRAINER_MODULES, GameSession, SessionMode, validate_answer
from ..messages import Effect, SaveTrainerStats
from ..navigation import go_back
from ..screens import Screen
from ..state import WizardState

LOCKED = "🔒 Module locked! Complete previous boss first."
NO_LESSONS = "No lessons available for this module yet."
PRACTICE_LOCKED = "Complete all lessons first to unlock practice!"
PRACTICE_DONE = "🎉 Practice complete! All exercises mastered! Press [r] to reset."
BOSS_LOCKED = "Complete lessons + 80% practice accuracy to fight boss!"
BOSS_ABANDONED = "Boss fight abandoned!"
LESSON_COMPLETE = "🎉 Lesson complete! Practice mode unlocked!"
PRACTICE_COMPLETE = "🎉 All exercises mastered! You're a Vim master! 🏆"

# Vim control chords forwarded into the answer as control characters.
_CONTROL_CHARS = {"d": "\x04", "u": "\x15", "f": "\x06", "b": "\x02"}

_SESSION_SCREENS = {
    SessionMode.LESSON: Screen.TRAINER_LESSON,
    SessionMode.PRACTICE: Screen.TRAINER_PRACTICE,
    SessionMode.BOSS: Screen.TRAINER_BOSS,
}


def format_solutions(solutions: tuple[str, ...]) -> str:
    return " or ".join(solutions)


def _save(state: WizardState) -> Effect:
    return SaveTrainerStats(state.trainer_stats)


def _start(state: WizardState, session: GameSession) -> None:
    state.trainer_session = session
    state.trainer_input = ""
    state.trainer_message = ""
    state.trainer_last_correct = False
    state.go(_SESSION_SCREENS[session.mode])


def _back_to_menu(state: WizardState, message: str = "") -> Effect:
    state.trainer_session = None
    state.trainer_input = ""
    state.trainer_message = message
    state.go(Screen.TRAINER_MENU)
    return _save(state)


# Module menu


def handle_menu(state: WizardState, key: Key) -> Effect | None:
    if is_up(key):
        state.trainer_cursor = max(0, state.trainer_cursor - 1)
        return None
    if is_down(key):
        state.trainer_cursor = min(len(TRAINER_MODULES) - 1, state.trainer_cursor + 1)
        return None
    if key.is_rune("q"):
        return escape(state)
    if not 0 <= state.trainer_cursor < len(TRAINER_MODULES):
        return None
    module = TRAINER_MODULES[state.trainer_cursor]
    stats = state.trainer_stats
    unlocked = stats.is_module_unlocked(module.id)

    if key == ENTER or key.is_rune("l"):
        if not unlocked:
            state.trainer_message = LOCKED
        elif not module.lessons:
            state.trainer_message = NO_LESSONS
        else:
            _start(state, GameSession.lesson(module, stats.progress(module.id)))
    elif key.is_rune("p"):
        if not stats.is_practice_ready(module):
            state.trainer_message = PRACTICE_LOCKED
            return None
        session = GameSession.practice(module, stats.progress(module.id))
        if not session.exercises or len(stats.progress(module.id).mastered) >= len(module.practice):
            state.trainer_message = PRACTICE_DONE
        else:
            _start(state, session)
    elif key.is_rune("r"):
        if not unlocked:
            state.trainer_message = "🔒 Module locked. Complete previous boss first."
            return None
        stats.progress(module.id).reset_practice()
        state.trainer_message = f"🔄 Practice progress reset for {module.name}. Try again!"
        return _save(state)
    elif key.is_rune("b"):
        if stats.is_boss_ready(module):
            _start(state, GameSession.boss_fight(module))
        else:
            state.trainer_message = BOSS_LOCKED
    return None


# Answer input


def _edit_input(state: WizardState, key: Key) -> bool:
    if key == BACKSPACE:
        state.trainer_input = state.trainer_input[:-1]
        return True
    if key == SPACE:
        state.trainer_input += " "
        return True
    if key.ctrl and key.char in _CONTROL_CHARS:
        state.trainer_input += _CONTROL_CHARS[key.char]
        return True
    text = key.printable
    if text is not None:
        state.trainer_input += text
        return True
    return False


def handle_exercise(state: WizardState, key: Key) -> Effect | None:
    """TRAINER_LESSON and TRAINER_PRACTICE."""
    session = state.trainer_session
    exercise = session.current if session is not None else None
    if session is None or exercise is None:
        state.go(Screen.TRAINER_MENU)
        return None
    if key == TAB:
        state.trainer_message = f"💡 Hint: {exercise.hint}"
        return None
    if key != ENTER:
        _edit_input(state, key)
        return None
    if not state.trainer_input:
        return None

    result = validate_answer(exercise, state.trainer_input)
    stats = state.trainer_stats
    stats.record_answer(result.correct)
    progress = stats.progress(session.module_id)
    state.trainer_last_correct = result.correct
    if result.correct:
        session.correct += 1
        if result.optimal:
            state.trainer_message = "✨ Perfect! Optimal solution!"
        else:
            state.trainer_message = f"✓ Correct! But {exercise.optimal} is more efficient."
    else:
        state.trainer_message = f"✗ Incorrect. Solutions: {format_solutions(result.solutions)}"

    effect = None
    if session.mode is SessionMode.LESSON and result.correct:
        progress.lessons_completed = max(progress.lessons_completed, session.index + 1)
    elif session.mode is SessionMode.PRACTICE:
        progress.record_practice(exercise.id, result.correct)
        effect = _save(state)
    state.go(Screen.TRAINER_RESULT)
    return effect


def handle_result(state: WizardState, key: Key) -> Effect | None:
    if key.is_rune("q"):
        return _back_to_menu(state)
    if key != ENTER:
        return None
    session = state.trainer_session
    if session is None:
        state.go(Screen.TRAINER_MENU)
        return None
    if session.advance():
        state.trainer_input = ""
        state.trainer_message = ""
        state.go(_SESSION_SCREENS[session.mode])
        return None
    if session.mode is SessionMode.PRACTICE:
        return _back_to_menu(state, PRACTICE_COMPLETE)
    return _back_to_menu(state, LESSON_COMPLETE)


# Boss fight


def handle_boss(state: WizardState, key: Key) -> Effect | None:
    session = state.trainer_session
    step = session.current if session is not None else None
    if session is None or step is None:
        state.go(Screen.TRAINER_MENU)
        return None
    if key != ENTER:
        _edit_input(state, key)
        return None
    if not state.trainer_input:
        return None

    result = validate_answer(step, state.trainer_input)
    state.trainer_stats.record_answer(result.correct)
    state.trainer_input = ""
    if result.correct:
        session.correct += 1
        if session.advance():
            if result.optimal:
                state.trainer_message = "✨ Perfect! Next challenge..."
            else:
                state.trainer_message = f"✓ Good! (Optimal: {step.optimal}) Next..."
            return None
        boss = session.module.boss
        state.trainer_stats.progress(session.module_id).boss_defeated = True
        state.trainer_last_correct = True
        state.trainer_message = f"🏆 VICTORY! You defeated {boss.name}!"
        state.go(Screen.TRAINER_BOSS_RESULT)
        return _save(state)

    session.lives -= 1
    hint = format_solutions(result.solutions)
    if session.lives <= 0:
        state.trainer_last_correct = False
        state.trainer_message = f"💀 DEFEATED! Solution was: {hint}"
        state.go(Screen.TRAINER_BOSS_RESULT)
        return _save(state)
    state.trainer_message = f"✗ Wrong! Was: {hint} | Lives: {'❤️' * session.lives}"
    return None


def handle_boss_result(state: WizardState, key: Key) -> Effect | None:
    if key == ENTER or key.is_rune("q"):
        return _back_to_menu(state)
    return None


def escape(state: WizardState) -> Effect:
    """``esc`` on any trainer screen: persist stats, then leave one level."""
    if state.screen is Screen.TRAINER_MENU:
        state.trainer_session = None
        go_back(state)
        return _save(state)
    if state.screen is Screen.TRAINER_BOSS:
        return _back_to_menu(state, BOSS_ABANDONED)
    return _back_to_menu(state)


HANDLERS = {
    Screen.TRAINER_MENU: handle_menu,
    Screen.TRAINER_LESSON: handle_exercise,
    Screen.TRAINER_PRACTICE: handle_exercise,
    Screen.TRAINER_RESULT: handle_result,
    Screen.TRAINER_BOSS: handle_boss,
    Screen.TRAINER_BOSS_RESULT: handle_boss_result,
}


__all__ = [
    "BOSS_ABANDONED",
    "BOSS_LOCKED",
    "HANDLERS",
    "LESSON_COMPLETE",
    "LOCKED",
    "PRACTICE_COMPLETE",
    "PRACTICE_LOCKED",
    "escape",
    "format_solutions",
]
