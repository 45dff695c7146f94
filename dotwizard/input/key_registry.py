"""Reusable key-binding registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .keys import Key


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more keys to a single action callback."""

    keys: tuple[Key, ...]
    handler: Callable[[], bool | None]


class KeyRegistry:
    """Small key-dispatch table keyed by exact ``Key`` values."""

    def __init__(self) -> None:
        self._handlers: dict[Key, Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyBinding) -> KeyRegistry:
        """Register one binding, overwriting existing handlers for same keys."""
        for key in binding.keys:
            self._handlers[key] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def handles(self, key: Key) -> bool:
        return key in self._handlers

    def dispatch(self, key: Key) -> bool | None:
        """Invoke bound handler for ``key`` and return its handled result.

        Returns ``None`` when no handler is bound.
        """
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


__all__ = ["KeyBinding", "KeyRegistry"]
