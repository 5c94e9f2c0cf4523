"""Proportional scrollbars drawn from a ScrollAxis.

The thumb covers the share of the track that the viewport covers of the
content. A position past the end of the content pins the thumb to the end of
the track. Nothing is drawn while the axis has no content.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from rich.cells import cell_len
from rich.text import Text
from textual.widget import Widget

from pueue_dash.tui.models import ScrollAxis

__all__ = [
    "HORIZONTAL_SYMBOLS",
    "VERTICAL_SYMBOLS",
    "HorizontalScrollbar",
    "ScrollbarSymbols",
    "render_scrollbar",
    "thumb_span",
]


@dataclass(frozen=True, slots=True)
class ScrollbarSymbols:
    """Glyphs of a scrollbar; ``begin`` and ``end`` may span several cells."""

    track: str
    thumb: str
    begin: str
    end: str


VERTICAL_SYMBOLS = ScrollbarSymbols(track="║", thumb="█", begin="▲", end="▼")
HORIZONTAL_SYMBOLS = ScrollbarSymbols(track="═", thumb="━", begin="⯇ ", end=" ⯈")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def thumb_span(axis: ScrollAxis, track_length: int, viewport_length: int) -> tuple[int, int]:
    """Start and length of the thumb within the track.

    Args:
        axis: Position and content length being shown.
        track_length: Cells available between the end symbols.
        viewport_length: Lines or columns visible at once.

    Returns:
        (start, length); length is at least 1 whenever the track has room.
    """
    if track_length <= 0:
        return 0, 0
    max_position = max(axis.content_length - 1, 0)
    start_position = min(axis.position, max_position)
    max_viewport_position = max_position + viewport_length
    if max_viewport_position <= 0:
        return 0, track_length
    end_position = start_position + viewport_length

    thumb_start = _round_half_up(start_position * track_length / max_viewport_position)
    thumb_start = min(max(thumb_start, 0), track_length - 1)
    thumb_end = _round_half_up(end_position * track_length / max_viewport_position)
    thumb_end = min(max(thumb_end, 0), track_length)
    return thumb_start, max(thumb_end - thumb_start, 1)


def render_scrollbar(
    axis: ScrollAxis,
    length: int,
    symbols: ScrollbarSymbols,
    viewport_length: int | None = None,
) -> list[str]:
    """Glyph for every cell of a scrollbar ``length`` cells long.

    Multi-cell end symbols are split into one entry per cell. Returns an
    empty list when the axis has no content or there is no room.
    """
    if axis.content_length == 0 or length <= 0:
        return []
    begin, end = list(symbols.begin), list(symbols.end)
    track_length = length - cell_len(symbols.begin) - cell_len(symbols.end)
    if track_length <= 0:
        return [symbols.track] * length

    viewport = length if viewport_length is None else viewport_length
    start, size = thumb_span(axis, track_length, viewport)
    track = [symbols.track] * track_length
    track[start : start + size] = [symbols.thumb] * size
    return begin + track + end


class HorizontalScrollbar(Widget):
    """One-row scrollbar for the horizontal axis."""

    DEFAULT_CSS = """
    HorizontalScrollbar {
        height: 1;
        margin: 0 1;
    }
    """

    def __init__(
        self,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.axis = ScrollAxis()
        self.viewport_length: int | None = None

    def update_axis(self, axis: ScrollAxis, viewport_length: int | None = None) -> None:
        """Show ``axis``; ``viewport_length`` defaults to the bar's width."""
        self.axis = ScrollAxis(axis.position, axis.content_length)
        self.viewport_length = viewport_length
        self.refresh()

    def render(self) -> Text:
        return Text(
            "".join(
                render_scrollbar(
                    self.axis, self.size.width, HORIZONTAL_SYMBOLS, self.viewport_length
                )
            ),
            no_wrap=True,
        )
