"""Path entry: line buffer, tab completion, and directory browser."""

from .browser import BrowserState, resolve_browser_root
from .buffer import LineBuffer
from .completion import CompletionState, split_path_for_completion
from .editor import PathEditor, PathEditorState, PathEditResult, PathMode

__all__ = [
    "BrowserState",
    "CompletionState",
    "LineBuffer",
    "PathEditResult",
    "PathEditor",
    "PathEditorState",
    "PathMode",
    "resolve_browser_root",
    "split_path_for_completion",
]
