"""Subprocess helpers shared by the install and project-init collaborators."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections import deque
from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]

TAIL_LINES = 5


class CommandError(Exception):
    """A command exited non-zero or could not be started."""

    def __init__(self, argv: Sequence[str], message: str) -> None:
        super().__init__(message)
        self.argv = list(argv)


def describe(argv: Sequence[str]) -> str:
    return shlex.join(argv)


def stream_command(
    argv: Sequence[str],
    emit: Emit,
    *,
    cwd: str | None = None,
    dry_run: bool = False,
) -> None:
    """Run ``argv`` with stdout and stderr merged, emitting each output line.

    Raises ``CommandError`` carrying the last lines of output on failure.
    """
    command = describe(argv)
    if dry_run:
        logger.info("dry-run: %s", command)
        emit(f"$ {command}")
        return
    logger.info("running: %s", command)
    tail: deque[str] = deque(maxlen=TAIL_LINES)
    try:
        proc = subprocess.Popen(
            list(argv),
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        raise CommandError(argv, f"{argv[0]}: {exc}") from exc
    assert proc.stdout is not None
    with proc.stdout:
        for raw in proc.stdout:
            line = raw.rstrip()
            if not line:
                continue
            tail.append(line)
            emit(line)
    code = proc.wait()
    if code != 0:
        detail = "\n".join(tail)
        message = f"{command} exited with status {code}"
        raise CommandError(argv, f"{message}\n{detail}" if detail else message)


def run_attached(argv: Sequence[str], *, cwd: str | None = None, dry_run: bool = False) -> None:
    """Run ``argv`` on the caller's terminal so it can prompt for input."""
    command = describe(argv)
    if dry_run:
        logger.info("dry-run (interactive): %s", command)
        return
    logger.info("running interactively: %s", command)
    try:
        proc = subprocess.run(list(argv), cwd=cwd, check=False)
    except OSError as exc:
        raise CommandError(argv, f"{argv[0]}: {exc}") from exc
    if proc.returncode != 0:
        raise CommandError(argv, f"{command} exited with status {proc.returncode}")


__all__ = ["CommandError", "Emit", "describe", "run_attached", "stream_command"]
