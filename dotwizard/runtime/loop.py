"""Main interactive event loop for the wizard.

Each iteration feeds resize events, drained completion messages, ticks and
at most one key press through ``update``, hands the returned effect to the
runner and redraws when anything changed. Feature logic lives in ``update``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..input import read_key
from ..wizard import KeyPressed, Message, Resize, Tick, WizardState, update
from ..wizard.messages import Effect
from .bridge import EffectRunner, MessagePort
from .terminal import TerminalController

logger = logging.getLogger(__name__)

Renderer = Callable[[WizardState, int, int], list[str]]


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    spinner_tick_seconds: float = 0.1
    idle_tick_seconds: float = 1.0
    key_poll_ms: int = 50


def compose_frame(lines: list[str], height: int) -> str:
    """Full-screen frame: home the cursor, write rows, clear leftovers."""
    rows = lines[: max(1, height)]
    body = "\x1b[K\r\n".join(rows)
    return f"\x1b[H{body}\x1b[K\x1b[J"


class WizardLoop:
    """Owns the current state and the message/effect plumbing around it."""

    def __init__(
        self,
        state: WizardState,
        port: MessagePort,
        runner: EffectRunner,
        render: Renderer,
        timing: RuntimeLoopTiming | None = None,
    ) -> None:
        self.state = state
        self.port = port
        self.runner = runner
        self.render = render
        self.timing = timing or RuntimeLoopTiming()
        self.dirty = True
        self._last_tick = 0.0

    def dispatch(self, message: Message) -> None:
        self.state, effect = update(self.state, message)
        self.dirty = True
        self.runner.execute(effect)

    def start(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            self.runner.execute(effect)

    def pump(self, width: int, height: int, now: float) -> None:
        """Apply everything that happened since the last iteration except keys."""
        if (width, height) != (self.state.width, self.state.height):
            self.dispatch(Resize(width, height))
        for message in self.port.drain():
            self.dispatch(message)
        interval = self.timing.spinner_tick_seconds if self.state.is_loading else self.timing.idle_tick_seconds
        if now - self._last_tick >= interval:
            self._last_tick = now
            loading = self.state.is_loading
            self.state, _ = update(self.state, Tick(now))
            if loading:
                self.dirty = True

    def frame(self) -> str | None:
        if not self.dirty:
            return None
        self.dirty = False
        lines = self.render(self.state, self.state.width, self.state.height)
        return compose_frame(lines, self.state.height)


def run_main_loop(
    loop: WizardLoop,
    terminal: TerminalController,
    stdin_fd: int,
    initial_effects: Iterable[Effect] = (),
) -> WizardState:
    """Run the wizard until a quit action occurs and return the final state."""
    with terminal.raw_mode():
        loop.start(initial_effects)
        while True:
            columns, lines = terminal.size()
            loop.pump(columns, lines, time.monotonic())
            if loop.state.quitting:
                break
            frame = loop.frame()
            if frame is not None:
                terminal.write(frame)
            key = read_key(stdin_fd, timeout_ms=loop.timing.key_poll_ms)
            if key is None:
                continue
            loop.dispatch(KeyPressed(key))
            if loop.state.quitting:
                break
    logger.info("wizard exited on screen %s", loop.state.screen.name)
    return loop.state


__all__ = ["Renderer", "RuntimeLoopTiming", "WizardLoop", "compose_frame", "run_main_loop"]
