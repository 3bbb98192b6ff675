"""
Keyboard input state.

Held-state is last-writer-wins per key. The interaction key is edge-triggered:
one physical press yields at most one consumed request.
"""
from __future__ import annotations

LEFT_KEYS = ("arrowleft", "a")
RIGHT_KEYS = ("arrowright", "d")
INTERACT_KEY = "e"
CLOSE_KEYS = frozenset({" ", "space", "enter", "return", "escape"})


def normalize_key(key: str) -> str:
    """Key identifiers are case-insensitive."""
    return str(key or "").lower()


def is_close_key(key: str) -> bool:
    return normalize_key(key) in CLOSE_KEYS


class InputState:
    """Currently held keys plus a pending interaction press."""

    def __init__(self):
        self.keys: dict[str, bool] = {}
        self._interaction_pending = False

    def set_key_held(self, key: str, held: bool):
        self.keys[normalize_key(key)] = bool(held)

    def is_held(self, key: str) -> bool:
        return self.keys.get(normalize_key(key), False)

    def any_held(self, keys) -> bool:
        return any(self.is_held(k) for k in keys)

    @property
    def moving_left(self) -> bool:
        return self.any_held(LEFT_KEYS)

    @property
    def moving_right(self) -> bool:
        return self.any_held(RIGHT_KEYS)

    def press_interaction(self):
        """Record an interaction press (edge)."""
        self._interaction_pending = True

    def consume_interaction_press(self, popup_open: bool = False) -> bool:
        """
        Return True once per recorded press.

        While a popup is open the press is discarded and False returned, so it
        cannot fire later when the popup closes.
        """
        pending = self._interaction_pending
        self._interaction_pending = False
        return pending and not popup_open

    def release_all(self):
        """Forget every held key (e.g. the window lost focus)."""
        self.keys.clear()
        self._interaction_pending = False
