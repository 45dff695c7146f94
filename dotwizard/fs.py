"""Filesystem helpers shared by path completion, the directory browser, and
project setup.

Listing failures degrade to empty results; nothing here raises for an
unreadable directory.
"""

from __future__ import annotations

import os
from pathlib import Path

# Checked in order: an Angular workspace also carries a package.json.
STACK_INDICATORS: tuple[tuple[str, str], ...] = (
    ("angular.json", "angular"),
    ("package.json", "node"),
    ("go.mod", "go"),
    ("Cargo.toml", "rust"),
    ("pom.xml", "java"),
    ("pyproject.toml", "python"),
    ("requirements.txt", "python"),
    ("Gemfile", "ruby"),
    ("composer.json", "php"),
)
UNKNOWN_STACK = "unknown"


def home_dir() -> str:
    """Return the user's home directory, or ``/`` when it cannot be resolved."""
    try:
        return str(Path.home())
    except (KeyError, RuntimeError):
        return "/"


def _is_directory_entry(entry: os.DirEntry) -> bool:
    try:
        if entry.is_dir(follow_symlinks=False):
            return True
        if entry.is_symlink():
            return entry.is_dir(follow_symlinks=True)
    except OSError:
        return False
    return False


def list_directories(directory: str, prefix: str, show_hidden: bool) -> list[str]:
    """List child directories of ``directory`` whose names start with ``prefix``.

    Matching is case-insensitive. Symlinks that resolve to directories count as
    directories. Dot-entries are skipped unless ``show_hidden``. Returns a
    sorted list, or ``[]`` when the directory cannot be read.
    """
    lowered = prefix.lower()
    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                name = entry.name
                if not show_hidden and name.startswith("."):
                    continue
                if lowered and not name.lower().startswith(lowered):
                    continue
                if not _is_directory_entry(entry):
                    continue
                names.append(name)
    except OSError:
        return []
    names.sort()
    return names


def expand_path(text: str, home: str | None = None) -> str:
    """Expand a leading ``~/`` to the home directory; other text is unchanged."""
    if text.startswith("~/"):
        base = home if home is not None else home_dir()
        return os.path.join(base, text[2:])
    return text


def contract_home(path: str, home: str | None = None) -> str:
    """Replace a home-directory prefix with ``~`` for display."""
    base = home if home is not None else home_dir()
    if path == base:
        return "~"
    if path.startswith(base.rstrip("/") + "/"):
        return "~" + path[len(base.rstrip("/")):]
    return path


def detect_stack(path: str) -> str:
    """Guess the project stack from indicator files in ``path``."""
    for filename, stack in STACK_INDICATORS:
        if os.path.exists(os.path.join(path, filename)):
            return stack
    return UNKNOWN_STACK


__all__ = [
    "STACK_INDICATORS",
    "UNKNOWN_STACK",
    "contract_home",
    "detect_stack",
    "expand_path",
    "home_dir",
    "list_directories",
]
