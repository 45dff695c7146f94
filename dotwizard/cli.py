"""Command-line front door for dotwizard.

Parses CLI options and configures logging, then either prints something
non-interactively (``--list-skills``, ``--render``) or runs the wizard.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path

from . import config
from .fs import home_dir
from .logging_setup import setup_logging
from .render import available_theme_names, render_lines
from .render.theme import resolve_theme
from .runtime.app import AppOptions, build_initial_state, run_app
from .services.system import detect_system
from .skills.catalog import DEFAULT_SKILLS_REPO, CatalogError, fetch_skill_catalog
from .skills.layout import category_header, ordered_skills, skill_label
from .wizard import Screen

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _screen_name(value: str) -> Screen:
    try:
        return Screen(value.strip().lower())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"unknown screen: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotwizard",
        description="Interactive installer for a terminal development environment.",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="Minimum level written to the log file.")
    parser.add_argument("--log-file", type=Path, default=None, help="Log file path (default: user log directory).")
    parser.add_argument("--dry-run", action="store_true", help="Log install commands instead of running them.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--style", default=None, help="Pygments style for LazyVim code samples.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    hidden = parser.add_mutually_exclusive_group()
    hidden.add_argument(
        "--show-hidden",
        dest="show_hidden",
        action="store_true",
        default=None,
        help="Show hidden directories in the project path browser.",
    )
    hidden.add_argument("--hide-hidden", dest="show_hidden", action="store_false", help=argparse.SUPPRESS)
    parser.add_argument("--list-skills", action="store_true", help="Print the skills catalog and exit.")
    parser.add_argument("--render", metavar="SCREEN", type=_screen_name, help="Render one screen and exit.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    return parser


def list_skills(home: Path, repo_url: str) -> str:
    """Catalog listing grouped by category, one skill per line."""
    skills = ordered_skills(fetch_skill_catalog(home, repo_url))
    out: list[str] = []
    category = None
    for skill in skills:
        if skill.category != category:
            category = skill.category
            if out:
                out.append("")
            out.append(category_header(category))
        badge = "✓" if skill.installed else " "
        out.append(f"  {badge} {skill_label(skill)}")
    return "\n".join(out) + "\n" if out else "No skills found\n"


def render_screen(screen: Screen, no_color: bool, style: str | None, theme: str | None, max_cols: int) -> str:
    """Render ``screen`` for the current host with a fresh state."""
    lines = shutil.get_terminal_size((80, 24)).lines
    state = build_initial_state(home_dir(), os.getcwd(), detect_system(), config.load_show_hidden(), max_cols, lines)
    state.screen = screen
    rows = render_lines(
        state,
        max_cols,
        lines,
        no_color,
        style or config.load_code_style(),
        resolve_theme(theme or config.load_theme_name(), no_color=no_color),
    )
    while rows and not rows[-1].strip():
        rows.pop()
    suffix = "" if no_color else "\033[0m"
    return "\n".join(rows) + suffix + "\n"


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the wizard or a one-shot command."""
    args = build_parser().parse_args(argv)
    log_file = setup_logging(args.log_level, args.log_file)
    logger.debug("arguments: %s (log=%s)", vars(args), log_file)

    if args.list_skills:
        home = Path(home_dir())
        repo_url = config.load_skills_repo_url() or DEFAULT_SKILLS_REPO
        try:
            sys.stdout.write(list_skills(home, repo_url))
        except CatalogError as exc:
            logger.warning("listing skills failed: %s", exc)
            raise SystemExit(f"dotwizard: {exc}") from exc
        return

    if args.render is not None:
        max_cols = args.max_cols if args.max_cols is not None else shutil.get_terminal_size((80, 24)).columns
        sys.stdout.write(render_screen(args.render, args.no_color, args.style, args.theme, max_cols))
        return

    options = AppOptions(
        dry_run=args.dry_run,
        no_color=args.no_color,
        style=args.style,
        theme=args.theme,
        show_hidden=args.show_hidden,
    )
    code = run_app(options)
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
