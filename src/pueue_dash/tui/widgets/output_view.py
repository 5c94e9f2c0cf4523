from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from pueue_dash.tui.models import CapturedOutput, ScrollAxis
from pueue_dash.tui.widgets.cells import crop_cells
from pueue_dash.tui.widgets.scrollbar import VERTICAL_SYMBOLS, render_scrollbar


class OutputView(Widget):
    """Content viewport showing the captured status output.

    Lines are shifted by the vertical and horizontal scroll positions; rows
    and columns past the end of the content stay blank. The vertical
    scrollbar is drawn over the rightmost column. A failed command shows a
    red banner on the first row.
    """

    DEFAULT_CSS = """
    OutputView {
        height: 1fr;
    }
    """

    ERROR_STYLE = "bold white on red"

    def __init__(
        self,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.output = CapturedOutput.empty()
        self.vertical = ScrollAxis()
        self.horizontal = ScrollAxis()

    def update_view(
        self,
        output: CapturedOutput,
        vertical: ScrollAxis,
        horizontal: ScrollAxis,
    ) -> None:
        """Show ``output`` at the given scroll positions."""
        self.output = output
        self.vertical = ScrollAxis(vertical.position, vertical.content_length)
        self.horizontal = ScrollAxis(horizontal.position, horizontal.content_length)
        self.refresh()

    def text_width(self, width: int, height: int) -> int:
        """Columns left for output once the vertical scrollbar is drawn."""
        if self.vertical.content_length and height > 0:
            return max(width - 1, 0)
        return width

    @property
    def viewport_width(self) -> int:
        """Output columns visible at the current widget size."""
        return self.text_width(self.size.width, self.size.height)

    def visible_rows(self, width: int, height: int) -> list[Text]:
        """Build exactly ``height`` rows of exactly ``width`` cells."""
        if width <= 0 or height <= 0:
            return []

        scrollbar = render_scrollbar(self.vertical, height, VERTICAL_SYMBOLS)
        text_width = self.text_width(width, height)

        rows: list[Text] = []
        if self.output.error is not None:
            banner = Text(f" {self.output.error} ", style=self.ERROR_STYLE)
            rows.append(crop_cells(banner, 0, text_width))

        lines = self.output.lines
        first = self.vertical.position
        for index in range(first, first + height - len(rows)):
            line = lines[index] if index < len(lines) else Text("")
            rows.append(crop_cells(line, self.horizontal.position, text_width))

        if scrollbar:
            for row, glyph in zip(rows, scrollbar):
                row.append(glyph)
        return rows

    def render(self) -> Text:
        rows = self.visible_rows(self.size.width, self.size.height)
        return Text("\n").join(rows)
