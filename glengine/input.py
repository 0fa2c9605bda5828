"""Keyboard state tracking."""

from __future__ import annotations

from dataclasses import dataclass, field

KEY_ESCAPE = 0
"""Slot in the keyboard state table that records the escape key."""

ESCAPE_KEYSYM = 65307
"""X11 key symbol of the escape key."""

KEY_COUNT = 256


@dataclass
class InputState:
    """Records which tracked keys are currently held down."""

    _keys: list[bool] = field(default_factory=lambda: [False] * KEY_COUNT, repr=False)

    def key_down(self, key_symbol: int) -> None:
        """Mark the key for ``key_symbol`` as pressed; untracked keys are ignored."""
        if key_symbol == ESCAPE_KEYSYM:
            self._keys[KEY_ESCAPE] = True

    def key_up(self, key_symbol: int) -> None:
        """Mark the key for ``key_symbol`` as released; untracked keys are ignored."""
        if key_symbol == ESCAPE_KEYSYM:
            self._keys[KEY_ESCAPE] = False

    def is_escape_pressed(self) -> bool:
        """Return whether the escape key is held down."""
        return self._keys[KEY_ESCAPE]