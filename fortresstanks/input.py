"""Keyboard and mouse state tracking between frames."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, IntEnum, auto


class KeyType(IntEnum):
    """Keys the game reacts to, numbered by virtual-key code."""

    LEFT_MOUSE = 0x01
    RIGHT_MOUSE = 0x02

    UP = 0x26
    DOWN = 0x28
    LEFT = 0x25
    RIGHT = 0x27
    SPACE_BAR = 0x20

    KEY_1 = ord("1")
    KEY_2 = ord("2")

    W = ord("W")
    A = ord("A")
    S = ord("S")
    D = ord("D")
    Q = ord("Q")
    E = ord("E")


class KeyState(Enum):
    NONE = auto()
    PRESS = auto()
    DOWN = auto()
    UP = auto()


_HELD = (KeyState.PRESS, KeyState.DOWN)


def _next_state(state: KeyState, held: bool) -> KeyState:
    was_held = state in _HELD
    if held:
        return KeyState.PRESS if was_held else KeyState.DOWN
    return KeyState.UP if was_held else KeyState.NONE


class InputManager:
    """Turns the set of held keys each frame into down, press and up events."""

    def __init__(self) -> None:
        self._states = {key: KeyState.NONE for key in KeyType}
        self.mouse_pos: tuple[int, int] = (0, 0)

    def update(
        self, pressed: Iterable[int], mouse_pos: tuple[int, int] | None = None
    ) -> None:
        """Advance one frame given the keys held now and the mouse position."""
        held = set(pressed)
        self._states = {
            key: _next_state(state, key in held) for key, state in self._states.items()
        }
        if mouse_pos is not None:
            self.mouse_pos = (int(mouse_pos[0]), int(mouse_pos[1]))

    def _state(self, key: int) -> KeyState:
        return self._states[KeyType(key)]

    def is_button(self, key: int) -> bool:
        """True while the key has been held for more than one frame."""
        return self._state(key) is KeyState.PRESS

    def is_button_down(self, key: int) -> bool:
        """True on the first frame the key is held."""
        return self._state(key) is KeyState.DOWN

    def is_button_up(self, key: int) -> bool:
        """True on the first frame after the key is released."""
        return self._state(key) is KeyState.UP