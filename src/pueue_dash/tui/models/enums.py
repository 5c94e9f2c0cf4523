from enum import Enum


class InputMode(str, Enum):
    """Which handler set receives key presses."""

    NORMAL = "normal"
    EDITING = "editing"


class KeyEventKind(str, Enum):
    """Kind of a key event reported by the terminal."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


class ScrollDirection(str, Enum):
    """Direction of a mouse wheel event."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class RouterAction(str, Enum):
    """Follow-up work requested by the input router."""

    NONE = "none"
    REFRESH = "refresh"
    QUIT = "quit"
