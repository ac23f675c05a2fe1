"""Keyboard and mouse state tracked from window events."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Key(enum.IntEnum):
    """Key codes of the keys the program reacts to."""

    ESCAPE = 256
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    A = 65
    D = 68
    S = 83
    W = 87
    LEFT_CONTROL = 341
    RIGHT_CONTROL = 345


class MouseButton(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Action(enum.IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


_HOLD_KEYS = {
    Key.W: "w",
    Key.S: "s",
    Key.A: "a",
    Key.D: "d",
    Key.UP: "arrow_up",
    Key.LEFT: "arrow_left",
    Key.DOWN: "arrow_down",
    Key.RIGHT: "arrow_right",
    Key.LEFT_CONTROL: "ctrl",
    Key.RIGHT_CONTROL: "ctrl",
}


def _as_enum(enum_type, value):
    try:
        return enum_type(value)
    except ValueError:
        return None


@dataclass
class InputState:
    """Which keys and buttons are held and where the pointer is."""

    start_sim_click: bool = False
    pointer_x: int = 0
    pointer_y: int = 0
    mouse_press_active: bool = False
    pointer_x_last_click: int = 0
    pointer_y_last_click: int = 0
    pointer_x_last_frame: int = 0
    pointer_y_last_frame: int = 0
    middle_mouse: bool = False
    ctrl: bool = False
    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    most_recent_ad_press: str = "s"
    arrow_up: bool = False
    arrow_left: bool = False
    arrow_down: bool = False
    arrow_right: bool = False

    def on_key(self, key: int, action: int) -> None:
        """Record a key press or release; other keys and repeats are ignored."""
        key_code = _as_enum(Key, key)
        act = _as_enum(Action, action)
        if key_code is None or act not in (Action.PRESS, Action.RELEASE):
            return
        attribute = _HOLD_KEYS.get(key_code)
        if attribute is None:
            return
        pressed = act is Action.PRESS
        setattr(self, attribute, pressed)
        if pressed and key_code in (Key.A, Key.D):
            self.most_recent_ad_press = attribute

    def on_mouse_button(self, button: int, action: int, x: float, y: float) -> bool:
        """Record a mouse button event at pointer (x, y).

        Returns True for a left-button press, which the caller forwards to the UI.
        """
        btn = _as_enum(MouseButton, button)
        act = _as_enum(Action, action)
        if btn is MouseButton.LEFT and act is Action.PRESS:
            self.mouse_press_active = True
            self.pointer_x_last_click = int(x)
            self.pointer_y_last_click = int(y)
            return True
        if btn is MouseButton.LEFT and act is Action.RELEASE:
            self.mouse_press_active = False
        elif btn is MouseButton.MIDDLE and act is Action.PRESS:
            self.middle_mouse = True
            self.pointer_x_last_frame = int(x)
            self.pointer_y_last_frame = int(y)
        elif btn is MouseButton.MIDDLE and act is Action.RELEASE:
            self.middle_mouse = False
        return False

    def on_cursor(self, x: float, y: float) -> None:
        """Record the pointer's current position."""
        self.pointer_x = int(x)
        self.pointer_y = int(y)