from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

NORMAL_HELP = "<i> :input / <q>, <Esc> :exit / <j> <k> , ▲ ▼ :scroll"
POPUP_HELP = "<esc> to close"


class InstructionBar(Widget):
    """Single-line key help above the output."""

    DEFAULT_CSS = """
    InstructionBar {
        height: 1;
    }
    """

    popup_visible: reactive[bool] = reactive(False)

    def render(self) -> Text:
        """Render the help for the current mode."""
        text = POPUP_HELP if self.popup_visible else NORMAL_HELP
        return Text(text, justify="center", no_wrap=True, overflow="ellipsis")
