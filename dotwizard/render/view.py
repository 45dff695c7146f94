"""Pure projection of ``WizardState`` onto terminal rows.

``render_lines`` never mutates state. Every row is clipped to the terminal
width and the result is exactly ``height`` rows: a header (title and
description), a screen body windowed to the space left, and a help footer.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..content.keymaps import keymap_categories
from ..content.lazyvim import LAZYVIM_TOPICS, LazyVimTopic
from ..content.tools import find_tool
from ..pathinput.completion import NO_MATCHES_MESSAGE
from ..pathinput.editor import PathMode
from ..selection.model import Entry, EntryKind, SelectionList
from ..trainer.model import TRAINER_MODULES, SessionMode
from ..wizard.options import screen_options, screen_selection
from ..wizard.screens import (
    KEYMAP_TOOL_BY_CATEGORY,
    LEARN_TOOL_SCREENS,
    Screen,
    screen_description,
    screen_title,
)
from ..wizard.state import WizardState
from ..wizard.steps import StepStatus
from ..wizard.viewport import clamp_scroll, follow_cursor, keymap_rows, topic_max_scroll, topic_rows
from ..skills.layout import browse_entries
from .ansi import clip_ansi_line, display_width
from .highlight import DEFAULT_STYLE, highlight_code, plain_code
from .theme import UITheme, resolve_theme

CURSOR_MARK = "▸ "
NO_MARK = "  "
HEADER_ROWS = 3
FOOTER_ROWS = 2

BANNER = (
    "     _       _              _                  _ ",
    "  __| | ___ | |___      __ (_)______ _ _ __ __| |",
    " / _` |/ _ \\| __\\ \\ /\\ / / | |_  / _` | '__/ _` |",
    "| (_| | (_) | |_ \\ V  V /  | |/ / (_| | | | (_| |",
    " \\__,_|\\___/ \\__| \\_/\\_/   |_/___\\__,_|_|  \\__,_|",
)

STEP_ICONS = {
    StepStatus.PENDING: "○",
    StepStatus.DONE: "✓",
    StepStatus.FAILED: "✗",
    StepStatus.SKIPPED: "⊘",
}

_DEFAULT_HELP = "↑/↓: move • enter: select • esc: back • space q: quit"


@dataclass(frozen=True)
class RenderContext:
    """Everything a body builder needs besides state."""

    width: int
    rows: int
    theme: UITheme
    style: str
    no_color: bool

    def paint(self, code: str, text: str) -> str:
        if not code:
            return text
        return f"{code}{text}{self.theme.reset}"


BodyBuilder = Callable[[WizardState, RenderContext], list[str]]


# Generic row builders


def _windowed(rows: list[str], cursor_row: int, visible: int) -> list[str]:
    """Slice ``rows`` so that ``cursor_row`` stays visible."""
    if len(rows) <= visible:
        return rows
    offset = follow_cursor(max(0, cursor_row), 0, visible)
    offset = min(offset, len(rows) - visible)
    return rows[offset : offset + visible]


def _option_rows(state: WizardState, ctx: RenderContext) -> list[str]:
    rows: list[str] = []
    for index, option in enumerate(screen_options(state)):
        if option.separator:
            rows.append(NO_MARK + ctx.paint(ctx.theme.separator, option.label))
        elif index == state.cursor:
            rows.append(ctx.paint(ctx.theme.cursor, CURSOR_MARK + option.label))
        else:
            rows.append(NO_MARK + ctx.paint(ctx.theme.option, option.label))
    return rows


def _entry_text(entry: Entry, selection: SelectionList | None) -> str:
    if entry.kind is EntryKind.GROUP and selection is not None and entry.group is not None:
        return f"{selection.group_check(entry.group).value} {entry.label}"
    if entry.kind is EntryKind.ITEM and selection is not None:
        box = "[x]" if selection.selected[entry.index] else "[ ]"
        indent = "  " if selection.groups else ""
        return f"{indent}{box} {entry.label}"
    if entry.kind is EntryKind.ITEM:
        return "  " + entry.label
    return entry.label


def _entry_rows(entries: list[Entry], selection: SelectionList | None, cursor: int, ctx: RenderContext) -> list[str]:
    rows: list[str] = []
    for index, entry in enumerate(entries):
        text = _entry_text(entry, selection)
        if entry.inert:
            code = ctx.theme.separator if entry.separator else ctx.theme.description
            rows.append(NO_MARK + ctx.paint(code, text))
        elif index == cursor:
            rows.append(ctx.paint(ctx.theme.cursor, CURSOR_MARK + text))
        elif entry.kind is EntryKind.ITEM and selection is not None and selection.selected[entry.index]:
            rows.append(NO_MARK + ctx.paint(ctx.theme.checked, text))
        else:
            rows.append(NO_MARK + ctx.paint(ctx.theme.option, text))
    return rows


def _list_body(state: WizardState, ctx: RenderContext, prefix: list[str] | None = None) -> list[str]:
    prefix = list(prefix or [])
    selection = screen_selection(state)
    if selection is not None:
        rows = _entry_rows(selection.entries(), selection, state.cursor, ctx)
    else:
        rows = _option_rows(state, ctx)
    visible = max(1, ctx.rows - len(prefix))
    return prefix + _windowed(rows, state.cursor, visible)


def _spinner_line(state: WizardState, ctx: RenderContext, text: str) -> str:
    return ctx.paint(ctx.theme.running, f"{state.spinner} {text}")


def _log_rows(lines: list[str], ctx: RenderContext, limit: int) -> list[str]:
    tail = lines[-limit:] if limit > 0 else []
    return [ctx.paint(ctx.theme.log, "  " + line) for line in tail]


# Screen bodies


def _welcome(state: WizardState, ctx: RenderContext) -> list[str]:
    rows = [ctx.paint(ctx.theme.title, line) for line in BANNER]
    rows.append("")
    rows.append(f"Detected system: {state.system.os_label}")
    if state.system.user_shell:
        rows.append(f"Current shell:   {state.system.user_shell}")
    rows.append("")
    rows.append(ctx.paint(ctx.theme.cursor, "Press enter to continue"))
    return rows


def _learn_tool(state: WizardState, ctx: RenderContext) -> list[str]:
    tool = find_tool(state.viewing_tool) if state.viewing_tool else None
    options = _option_rows(state, ctx)
    if tool is None:
        return _windowed(options, state.cursor, ctx.rows)
    card = ["", ctx.paint(ctx.theme.title, tool.name), tool.description]
    if tool.pros:
        card.append(ctx.paint(ctx.theme.success, "Pros:"))
        card.extend(f"  + {item}" for item in tool.pros)
    if tool.cons:
        card.append(ctx.paint(ctx.theme.warning, "Cons:"))
        card.extend(f"  - {item}" for item in tool.cons)
    if tool.website:
        card.append(ctx.paint(ctx.theme.description, tool.website))
    return options + card


def _backup_confirm(state: WizardState, ctx: RenderContext) -> list[str]:
    prefix = [f"  • ~/{path}" for path in state.existing_configs]
    return _list_body(state, ctx, prefix + [""])


def _restore_confirm(state: WizardState, ctx: RenderContext) -> list[str]:
    prefix: list[str] = []
    if 0 <= state.selected_backup < len(state.available_backups):
        backup = state.available_backups[state.selected_backup]
        prefix.append(ctx.paint(ctx.theme.title, backup.label))
        prefix.extend(f"  • ~/{path}" for path in backup.files)
        prefix.append("")
    return _list_body(state, ctx, prefix)


def _installing(state: WizardState, ctx: RenderContext) -> list[str]:
    rows: list[str] = []
    for step in state.steps:
        if step.status is StepStatus.RUNNING:
            rows.append(_spinner_line(state, ctx, step.name))
            continue
        icon = STEP_ICONS.get(step.status, "○")
        code = {
            StepStatus.DONE: ctx.theme.success,
            StepStatus.FAILED: ctx.theme.error,
        }.get(step.status, ctx.theme.description)
        rows.append(ctx.paint(code, f"{icon} {step.name}"))
    if state.install_started_at and state.now >= state.install_started_at:
        rows.append("")
        rows.append(ctx.paint(ctx.theme.description, f"Elapsed: {format_duration(state.now - state.install_started_at)}"))
    if state.show_details:
        rows.append("")
        rows.extend(_log_rows(state.log_lines, ctx, max(0, ctx.rows - len(rows))))
    elif state.log_lines:
        rows.append(ctx.paint(ctx.theme.log, "  " + state.log_lines[-1]))
    return rows


def _complete(state: WizardState, ctx: RenderContext) -> list[str]:
    rows = [ctx.paint(ctx.theme.success, "✅ Installation complete!")]
    if state.install_total_time:
        rows.append(f"Total time: {format_duration(state.install_total_time)}")
    if state.choices.shell:
        rows.append(f"Your default shell is now {state.choices.shell}.")
    rows.append("")
    rows.append(ctx.paint(ctx.theme.description, "Press enter to exit"))
    return rows


def _error(state: WizardState, ctx: RenderContext) -> list[str]:
    rows = [ctx.paint(ctx.theme.error, line) for line in (state.error_message or "Unknown error").split("\n")]
    rows.append("")
    rows.append(ctx.paint(ctx.theme.description, "r: retry from the start • enter: quit"))
    return rows


def _path_input(state: WizardState, ctx: RenderContext) -> list[str]:
    editor = state.path_editor
    buffer = editor.buffer
    text = buffer.text
    before, under, after = text[: buffer.cursor], text[buffer.cursor : buffer.cursor + 1], text[buffer.cursor + 1 :]
    cursor_cell = ctx.paint(ctx.theme.reverse, under or " ") if not ctx.no_color else f"[{under or ' '}]"
    rows = [f"📁 {before}{cursor_cell}{after}"]
    if editor.error:
        rows.append(ctx.paint(ctx.theme.error, f"✗ {editor.error}"))
    hidden = "shown" if editor.show_hidden else "hidden"
    rows.append(ctx.paint(ctx.theme.description, f"Hidden directories: {hidden} (. in browser to toggle)"))
    rows.append("")
    if editor.mode is PathMode.COMPLETION and editor.completion is not None:
        candidates = editor.completion.candidates
        if not candidates:
            rows.append(ctx.paint(ctx.theme.description, NO_MATCHES_MESSAGE))
        else:
            items = [
                ctx.paint(ctx.theme.cursor, CURSOR_MARK + name + "/")
                if index == editor.completion.highlighted
                else NO_MARK + name + "/"
                for index, name in enumerate(candidates)
            ]
            rows.extend(_windowed(items, editor.completion.highlighted, max(1, ctx.rows - len(rows))))
    elif editor.mode is PathMode.BROWSER and editor.browser is not None:
        browser = editor.browser
        rows.append(ctx.paint(ctx.theme.title, browser.root))
        items = [
            ctx.paint(ctx.theme.cursor, CURSOR_MARK + browser.row_label(row))
            if row == browser.cursor
            else NO_MARK + browser.row_label(row)
            for row in range(browser.row_count)
        ]
        rows.extend(_windowed(items, browser.cursor, max(1, ctx.rows - len(rows))))
    return rows


def _project_confirm(state: WizardState, ctx: RenderContext) -> list[str]:
    choices = state.choices
    summary = [
        f"  Path:   {choices.project_path}",
        f"  Stack:  {choices.project_stack or 'other'}",
        f"  Memory: {choices.project_memory}",
        f"  CI:     {choices.project_ci}",
    ]
    if choices.project_engram:
        summary.append("  Engram: yes")
    if choices.install_obsidian:
        summary.append("  Obsidian: will be installed")
    return _list_body(state, ctx, summary + [""])


def _project_installing(state: WizardState, ctx: RenderContext) -> list[str]:
    rows = [_spinner_line(state, ctx, f"Initializing {state.choices.project_path}"), ""]
    rows.extend(_log_rows(state.project_log_lines, ctx, max(0, ctx.rows - len(rows))))
    return rows


def _project_result(state: WizardState, ctx: RenderContext) -> list[str]:
    if state.error_message:
        rows = [ctx.paint(ctx.theme.error, f"✗ {line}") for line in state.error_message.split("\n")]
    else:
        rows = [ctx.paint(ctx.theme.success, f"✅ Project initialized in {state.choices.project_path}")]
    rows.append("")
    rows.extend(_log_rows(state.project_log_lines, ctx, max(0, ctx.rows - len(rows) - 2)))
    rows.append("")
    rows.append(ctx.paint(ctx.theme.description, "Press enter to return to the main menu"))
    return rows


def _skill_list(state: WizardState, ctx: RenderContext) -> list[str]:
    if state.skill_loading:
        return [_spinner_line(state, ctx, "Loading skills catalog...")]
    if state.skill_load_error:
        return [
            ctx.paint(ctx.theme.error, f"✗ {state.skill_load_error}"),
            "",
            ctx.paint(ctx.theme.description, "esc: back"),
        ]
    if state.screen is Screen.SKILL_BROWSE:
        rows = _entry_rows(browse_entries(state.skill_catalog), None, state.cursor, ctx)
        return _windowed(rows, state.cursor, ctx.rows)
    return _list_body(state, ctx)


def _skill_result(state: WizardState, ctx: RenderContext) -> list[str]:
    if state.skill_loading:
        text = "Updating catalog..." if state.screen is Screen.SKILL_UPDATE else "Working..."
        return [_spinner_line(state, ctx, text)]
    rows = [ctx.paint(ctx.theme.log, line) for line in state.skill_result_log]
    if state.skill_load_error:
        rows.append(ctx.paint(ctx.theme.error, f"✗ {state.skill_load_error}"))
    rows.append("")
    rows.append(ctx.paint(ctx.theme.description, "Press enter to return"))
    return rows


def _keymap_table(state: WizardState, ctx: RenderContext) -> list[str]:
    categories = keymap_categories(KEYMAP_TOOL_BY_CATEGORY[state.screen])
    if not 0 <= state.keymap_category < len(categories):
        return []
    category = categories[state.keymap_category]
    key_width = max((display_width(km.keys) for km in category.keymaps), default=0)
    rows = [ctx.paint(ctx.theme.title, category.name), ""]
    visible = keymap_rows(ctx.rows + HEADER_ROWS + FOOTER_ROWS)
    start = clamp_scroll(state.scroll, max(0, len(category.keymaps) - visible))
    for keymap in category.keymaps[start : start + visible]:
        pad = " " * (key_width - display_width(keymap.keys))
        mode = f" ({keymap.mode})" if keymap.mode else ""
        rows.append(f"  {ctx.paint(ctx.theme.cursor, keymap.keys)}{pad}  {keymap.description}{ctx.paint(ctx.theme.description, mode)}")
    return rows


def topic_lines(topic: LazyVimTopic, ctx: RenderContext) -> list[str]:
    """All rows of a topic before scrolling."""
    rows = [ctx.paint(ctx.theme.title, topic.title), ctx.paint(ctx.theme.description, topic.description), ""]
    rows.extend(topic.body)
    if topic.code:
        rows.append("")
        rule = "─" * max(10, min(60, ctx.width - 4))
        rows.append(ctx.paint(ctx.theme.code_border, rule))
        if ctx.no_color:
            code = plain_code(topic.code)
        else:
            code = highlight_code(topic.code, topic.code_language, ctx.style)
        rows.extend("  " + line for line in code)
        rows.append(ctx.paint(ctx.theme.code_border, rule))
    return rows


def _lazyvim_topic(state: WizardState, ctx: RenderContext) -> list[str]:
    if not 0 <= state.lazyvim_topic < len(LAZYVIM_TOPICS):
        return []
    topic = LAZYVIM_TOPICS[state.lazyvim_topic]
    height = ctx.rows + HEADER_ROWS + FOOTER_ROWS
    rows = topic_lines(topic, ctx)
    start = clamp_scroll(state.scroll, topic_max_scroll(topic, height))
    return rows[start : start + topic_rows(height)]


def _trainer_menu(state: WizardState, ctx: RenderContext) -> list[str]:
    stats = state.trainer_stats
    rows: list[str] = []
    for index, module in enumerate(TRAINER_MODULES):
        progress = stats.modules.get(module.id)
        if not stats.is_module_unlocked(module.id):
            status = "🔒"
        elif progress is not None and progress.boss_defeated:
            status = "🏆"
        else:
            done = progress.lessons_completed if progress is not None else 0
            status = f"{done}/{len(module.lessons)}"
        label = f"{module.icon} {module.name}  {status}"
        if index == state.trainer_cursor:
            rows.append(ctx.paint(ctx.theme.cursor, CURSOR_MARK + label))
        else:
            rows.append(NO_MARK + label)
    rows.append("")
    accuracy = stats.total_correct / stats.total_attempts * 100 if stats.total_attempts else 0.0
    rows.append(
        ctx.paint(
            ctx.theme.description,
            f"Answers: {stats.total_correct}/{stats.total_attempts} ({accuracy:.0f}%) • "
            f"Streak: {stats.current_streak} • Best: {stats.best_streak}",
        )
    )
    if state.trainer_message:
        rows.append("")
        rows.append(ctx.paint(ctx.theme.warning, state.trainer_message))
    return rows


def _visible_input(text: str) -> str:
    return "".join(f"^{chr(ord(ch) + 64)}" if ord(ch) < 32 else ch for ch in text)


def _trainer_exercise(state: WizardState, ctx: RenderContext) -> list[str]:
    session = state.trainer_session
    exercise = session.current if session is not None else None
    if session is None or exercise is None:
        return []
    heading = f"{session.module.icon} {session.module.name} — {session.index + 1}/{len(session.exercises)}"
    if session.mode is SessionMode.BOSS:
        heading = f"👹 {session.module.boss.name} — Lives: {'❤️' * session.lives}"
    rows = [ctx.paint(ctx.theme.title, heading), "", exercise.prompt, ""]
    rows.extend("    " + line for line in exercise.code.split("\n"))
    rows.append("")
    rows.append(f"> {_visible_input(state.trainer_input)}" + ("" if ctx.no_color else ctx.paint(ctx.theme.reverse, " ")))
    if state.trainer_message:
        rows.append("")
        rows.append(ctx.paint(ctx.theme.warning, state.trainer_message))
    return rows


def _trainer_result(state: WizardState, ctx: RenderContext) -> list[str]:
    code = ctx.theme.success if state.trainer_last_correct else ctx.theme.error
    rows = [ctx.paint(code, state.trainer_message), ""]
    if state.screen is Screen.TRAINER_RESULT:
        rows.append(ctx.paint(ctx.theme.description, "enter: continue • q: menu"))
    else:
        rows.append(ctx.paint(ctx.theme.description, "enter: back to menu"))
    return rows


_BODIES: dict[Screen, BodyBuilder] = {
    Screen.WELCOME: _welcome,
    Screen.BACKUP_CONFIRM: _backup_confirm,
    Screen.RESTORE_CONFIRM: _restore_confirm,
    Screen.INSTALLING: _installing,
    Screen.COMPLETE: _complete,
    Screen.ERROR: _error,
    Screen.PROJECT_PATH: _path_input,
    Screen.PROJECT_CONFIRM: _project_confirm,
    Screen.PROJECT_INSTALLING: _project_installing,
    Screen.PROJECT_RESULT: _project_result,
    Screen.SKILL_BROWSE: _skill_list,
    Screen.SKILL_INSTALL: _skill_list,
    Screen.SKILL_REMOVE: _skill_list,
    Screen.SKILL_RESULT: _skill_result,
    Screen.SKILL_UPDATE: _skill_result,
    Screen.LAZYVIM_TOPIC: _lazyvim_topic,
    Screen.TRAINER_MENU: _trainer_menu,
    Screen.TRAINER_LESSON: _trainer_exercise,
    Screen.TRAINER_PRACTICE: _trainer_exercise,
    Screen.TRAINER_BOSS: _trainer_exercise,
    Screen.TRAINER_RESULT: _trainer_result,
    Screen.TRAINER_BOSS_RESULT: _trainer_result,
}
for _screen in KEYMAP_TOOL_BY_CATEGORY:
    _BODIES[_screen] = _keymap_table
for _screen in LEARN_TOOL_SCREENS:
    _BODIES[_screen] = _learn_tool

_HELP: dict[Screen, str] = {
    Screen.WELCOME: "enter: continue • space: continue",
    Screen.MAIN_MENU: "↑/↓: move • enter: select • esc: quit",
    Screen.INSTALLING: "space d: toggle details • space q: quit after this step",
    Screen.PROJECT_PATH: "tab: complete • ctrl+b: browse • enter: confirm • esc: back",
    Screen.COMPLETE: "enter: exit",
    Screen.ERROR: "r: retry • enter: quit",
    Screen.AI_TOOLS_SELECT: "space: toggle • enter: select • esc: back",
    Screen.AI_FRAMEWORK_CATEGORY_ITEMS: "space/enter: toggle • a: toggle all • esc: back",
    Screen.LAZYVIM_TOPIC: "↑/↓ pgup/pgdn: scroll • enter/q: back",
    Screen.TRAINER_MENU: "enter/l: lesson • p: practice • b: boss • r: reset • q: back",
    Screen.TRAINER_LESSON: "type the keys • tab: hint • enter: submit • esc: menu",
    Screen.TRAINER_PRACTICE: "type the keys • tab: hint • enter: submit • esc: menu",
    Screen.TRAINER_BOSS: "type the keys • enter: submit • esc: abandon",
}
for _screen in KEYMAP_TOOL_BY_CATEGORY:
    _HELP[_screen] = "↑/↓ pgup/pgdn: scroll • enter/q: back"


def _help_line(state: WizardState) -> str:
    if state.leader_armed:
        return "leader: q quit • d details"
    return _HELP.get(state.screen, _DEFAULT_HELP)


def render_lines(
    state: WizardState,
    width: int,
    height: int,
    no_color: bool = False,
    style: str = DEFAULT_STYLE,
    theme: UITheme | None = None,
) -> list[str]:
    """Project ``state`` onto exactly ``height`` rows no wider than ``width``."""
    width = max(1, width)
    height = max(1, height)
    active_theme = resolve_theme(None, no_color=True) if no_color else (theme or resolve_theme(None))
    ctx = RenderContext(
        width=width,
        rows=max(1, height - HEADER_ROWS - FOOTER_ROWS),
        theme=active_theme,
        style=style,
        no_color=no_color,
    )
    description = screen_description(
        state.screen,
        os_name=state.system.os_label,
        stack=state.choices.project_stack,
    )
    header = [
        ctx.paint(active_theme.title, screen_title(state.screen)),
        ctx.paint(active_theme.description, description),
        "",
    ]
    builder = _BODIES.get(state.screen)
    body = builder(state, ctx) if builder is not None else _list_body(state, ctx)
    body = body[: ctx.rows]
    body.extend([""] * (ctx.rows - len(body)))
    footer = ["", ctx.paint(active_theme.help, _help_line(state))]
    lines = (header + body + footer)[:height]
    lines.extend([""] * (height - len(lines)))
    return [clip_ansi_line(line, width) for line in lines]


def make_renderer(
    *,
    no_color: bool = False,
    style: str = DEFAULT_STYLE,
    theme: UITheme | None = None,
) -> Callable[[WizardState, int, int], list[str]]:
    """Bind display options so the loop only passes state and size."""

    def render(state: WizardState, width: int, height: int) -> list[str]:
        return render_lines(state, width, height, no_color, style, theme)

    return render


def format_duration(seconds: float) -> str:
    seconds = max(0.0, seconds)
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m {secs:02d}s" if minutes else f"{secs}s"


__all__ = ["RenderContext", "format_duration", "make_renderer", "render_lines", "topic_lines"]
