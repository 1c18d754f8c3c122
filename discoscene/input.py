"""Keyboard handling: keys mapped to callbacks, fired once per press or while held."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class _Binding:
    func: Callable[[Any], None]
    holdable: bool
    pressed: bool = False


class InputHandler:
    """Tracks key state for a window and dispatches registered key callbacks.

    The handler registers itself for the window's ``on_key_press`` and
    ``on_key_release`` events, so the window must offer ``push_handlers``.
    """

    def __init__(self, window) -> None:
        self.window = window
        self._bindings: dict[int, _Binding] = {}
        self._down: set[int] = set()
        window.push_handlers(self)

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        self._down.add(symbol)

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        self._down.discard(symbol)

    def add_key_callback(self, key: int, holdable: bool, func: Callable[[Any], None]) -> None:
        """Register ``func(window)`` for ``key``; non-holdable keys fire once per press."""
        self._bindings[key] = _Binding(func, holdable)

    def process_input(self) -> None:
        """Run the callbacks of pressed keys, in ascending key order."""
        for key in sorted(self._bindings):
            binding = self._bindings[key]
            if key in self._down:
                if binding.holdable or not binding.pressed:
                    binding.func(self.window)
                    binding.pressed = True
            else:
                binding.pressed = False