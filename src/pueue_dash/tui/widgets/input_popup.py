"""Argument popup drawn over the dashboard."""

from __future__ import annotations

from rich.cells import cell_len
from rich.text import Text
from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widget import Widget

from pueue_dash.constants import DEFAULT_POPUP_WIDTH_PERCENT, POPUP_HEIGHT
from pueue_dash.tui.models import InputBuffer
from pueue_dash.tui.widgets.cells import crop_cells

__all__ = ["ArgumentsPopup", "InputPopup", "POPUP_TITLE"]

POPUP_TITLE = " pueue status $args_input "


class InputPopup(Widget):
    """Bordered single-line view of the argument editor.

    The cursor cell is highlighted only while editing. When the text is
    wider than the box the view scrolls so the cursor stays visible.
    """

    DEFAULT_CSS = """
    InputPopup {
        height: 3;
        border: solid ansi_bright_magenta;
        border-title-color: ansi_bright_magenta;
        background: $surface;
    }
    """

    CURSOR_STYLE = "reverse"

    def __init__(
        self,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.editor_buffer = InputBuffer()
        self.editing = True
        self.border_title = POPUP_TITLE

    def update_buffer(self, buffer: InputBuffer, editing: bool) -> None:
        self.editor_buffer = InputBuffer(buffer.text, buffer.cursor)
        self.editing = editing
        self.refresh()

    def visible_text(self, width: int) -> Text:
        """The part of the buffer shown in a box ``width`` cells wide."""
        text, cursor = self.editor_buffer.text, self.editor_buffer.cursor
        line = Text(text, no_wrap=True)
        if self.editing:
            under_cursor = text[cursor] if cursor < len(text) else " "
            line = Text.assemble(
                text[:cursor],
                (under_cursor, self.CURSOR_STYLE),
                text[cursor + 1 :],
                no_wrap=True,
            )

        cursor_cell = self.editor_buffer.cursor_cells()
        # the cell under the cursor must fit, wide characters included
        cursor_width = cell_len(text[cursor]) if cursor < len(text) else 1
        offset = max(0, cursor_cell + cursor_width - width)
        return crop_cells(line, offset, width)

    def render(self) -> Text:
        return self.visible_text(self.size.width)


class ArgumentsPopup(ModalScreen[None]):
    """Overlay holding the argument editor.

    The screen background stays transparent so the dashboard remains visible
    around the box; the box itself is opaque. Keys bubble to the app, which
    routes them, so this screen defines no bindings of its own.
    """

    DEFAULT_CSS = f"""
    ArgumentsPopup {{
        align: center middle;
        background: transparent;
    }}

    ArgumentsPopup > InputPopup {{
        width: {DEFAULT_POPUP_WIDTH_PERCENT}%;
        height: {POPUP_HEIGHT};
    }}
    """

    def __init__(
        self,
        buffer: InputBuffer | None = None,
        width_percent: int = DEFAULT_POPUP_WIDTH_PERCENT,
    ) -> None:
        super().__init__()
        self.editor_buffer = buffer if buffer is not None else InputBuffer()
        self.width_percent = width_percent

    def compose(self) -> ComposeResult:
        popup = InputPopup(id="popup-input")
        popup.editor_buffer = InputBuffer(self.editor_buffer.text, self.editor_buffer.cursor)
        yield popup

    def on_mount(self) -> None:
        self.query_one(InputPopup).styles.width = f"{self.width_percent}%"

    def update_buffer(self, buffer: InputBuffer, editing: bool) -> None:
        self.editor_buffer = buffer
        try:
            self.query_one(InputPopup).update_buffer(buffer, editing)
        except NoMatches:
            # not composed yet; compose picks up editor_buffer
            pass
