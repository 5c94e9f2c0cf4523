"""Keyboard and mouse routing for the dashboard.

The router owns the Normal/Editing state machine: key presses go to the
scroll handlers while browsing and to the editor while the popup is open.
It mutates the state it is given and tells the caller what to do next.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pueue_dash.constants import DEFAULT_PAGE_SIZE
from pueue_dash.logging import get_logger
from pueue_dash.tui.models import (
    DashboardState,
    InputMode,
    KeyEventKind,
    RouterAction,
    ScrollDirection,
)

if TYPE_CHECKING:
    from textual import events

__all__ = ["InputRouter", "KeyInput"]

logger = get_logger(__name__)

QUIT_KEYS = frozenset({"q", "escape"})
OPEN_POPUP_KEY = "i"


@dataclass(frozen=True, slots=True)
class KeyInput:
    """A key event reduced to what the router needs.

    Attributes:
        key: Key name as reported by Textual ("j", "escape", "pagedown").
        character: Character produced by the key, if any.
        kind: Press, repeat or release.
    """

    key: str
    character: str | None = None
    kind: KeyEventKind = KeyEventKind.PRESS

    @classmethod
    def from_event(cls, event: events.Key) -> KeyInput:
        """Convert a Textual key event.

        Textual only reports presses, so every converted event is a PRESS.
        """
        character = event.character if event.is_printable else None
        return cls(key=event.key, character=character)

    @property
    def is_printable(self) -> bool:
        return bool(self.character) and self.character.isprintable()


class InputRouter:
    """Dispatch input events according to the current input mode.

    Args:
        page_size: Lines or columns moved by page-sized scrolls.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.page_size = page_size

    def handle_key(self, state: DashboardState, key: KeyInput) -> RouterAction:
        """Apply one key event to ``state``.

        Only presses act; repeats and releases are ignored so platforms that
        report both do not trigger actions twice.

        Returns:
            QUIT to exit, REFRESH to rerun the status command, else NONE.
        """
        if key.kind is not KeyEventKind.PRESS:
            return RouterAction.NONE

        if state.input_mode is InputMode.NORMAL:
            return self._handle_normal_key(state, key)
        return self._handle_editing_key(state, key)

    def handle_scroll(
        self,
        state: DashboardState,
        direction: ScrollDirection,
        ctrl: bool = False,
    ) -> RouterAction:
        """Apply one mouse wheel event.

        Holding Ctrl turns vertical wheel movement into horizontal scrolling.
        """
        if ctrl and direction is ScrollDirection.DOWN:
            direction = ScrollDirection.RIGHT
        elif ctrl and direction is ScrollDirection.UP:
            direction = ScrollDirection.LEFT

        scroll = state.scroll
        if direction is ScrollDirection.DOWN:
            scroll.scroll_down()
        elif direction is ScrollDirection.UP:
            scroll.scroll_up()
        elif direction is ScrollDirection.LEFT:
            scroll.scroll_left()
        else:
            scroll.scroll_right()
        return RouterAction.NONE

    def handle_paste(self, state: DashboardState, text: str) -> RouterAction:
        """Insert pasted text into the editor.

        Only the first line is kept and non-printable characters are dropped.
        Pastes outside editing mode are ignored.
        """
        if state.input_mode is not InputMode.EDITING:
            return RouterAction.NONE
        lines = text.splitlines()
        first_line = lines[0] if lines else ""
        state.input.insert_text("".join(char for char in first_line if char.isprintable()))
        return RouterAction.NONE

    def _handle_normal_key(self, state: DashboardState, key: KeyInput) -> RouterAction:
        name = key.key
        if name in QUIT_KEYS:
            logger.debug("quit_requested", key=name)
            return RouterAction.QUIT
        if name == OPEN_POPUP_KEY:
            state.toggle_popup()
            return RouterAction.NONE

        scroll = state.scroll
        page = self.page_size
        if name in ("j", "down"):
            scroll.scroll_down()
        elif name in ("k", "up"):
            scroll.scroll_up()
        elif name == "pagedown":
            scroll.scroll_down(page)
        elif name == "pageup":
            scroll.scroll_up(page)
        elif name in ("h", "left"):
            scroll.scroll_left()
        elif name in ("l", "right"):
            scroll.scroll_right()
        elif name == "home":
            scroll.scroll_left(page)
        elif name == "end":
            scroll.scroll_right(page)
        return RouterAction.NONE

    def _handle_editing_key(self, state: DashboardState, key: KeyInput) -> RouterAction:
        editor = state.input
        name = key.key
        if name == "enter":
            extra_args = state.submit_input()
            logger.debug("extra_args_submitted", extra_args=extra_args)
            return RouterAction.REFRESH
        if name == "escape":
            state.toggle_popup()
        elif name == "backspace":
            editor.delete_char_before_cursor()
        elif name == "left":
            editor.move_cursor_left()
        elif name == "right":
            editor.move_cursor_right()
        elif key.is_printable:
            assert key.character is not None
            editor.insert_text(key.character)
        return RouterAction.NONE
