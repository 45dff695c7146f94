"""Runtime orchestration: effect bridge, terminal control and the event loop."""

from .bridge import EffectRunner, MessagePort, RunnerSettings
from .loop import RuntimeLoopTiming, WizardLoop, run_main_loop
from .terminal import TerminalController

__all__ = [
    "EffectRunner",
    "MessagePort",
    "RunnerSettings",
    "RuntimeLoopTiming",
    "TerminalController",
    "WizardLoop",
    "run_main_loop",
]
