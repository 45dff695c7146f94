"""Persistent JSON config helpers.

Stores the hidden-directory preference of the path browser, the code style
and UI theme, and optional overrides for the skills repository and the
project init script. Missing or malformed config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "dotwizard"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_CODE_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_string(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_show_hidden() -> bool:
    """Return the persisted hidden-directory preference.

    Only explicit boolean values are accepted; anything else is ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_code_style() -> str:
    """Pygments style used for LazyVim code samples."""
    return _load_string("code_style") or DEFAULT_CODE_STYLE


def save_code_style(style: str) -> None:
    _save_string("code_style", style)


def load_theme_name() -> str | None:
    return _load_string("theme")


def save_theme_name(theme_name: str) -> None:
    _save_string("theme", theme_name)


def load_skills_repo_url() -> str | None:
    return _load_string("skills_repo_url")


def load_init_script() -> str | None:
    """Explicit path to ``init-project.sh``; ``None`` fetches the starter repo."""
    return _load_string("init_script")


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CODE_STYLE",
    "load_code_style",
    "load_config",
    "load_init_script",
    "load_show_hidden",
    "load_skills_repo_url",
    "load_theme_name",
    "save_code_style",
    "save_config",
    "save_show_hidden",
    "save_theme_name",
]
