from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ScrollAxis:
    """Position and content extent along one axis.

    The position is never clamped against ``content_length``; scrolling past
    the end simply shows blank space. ``content_length`` only sizes the
    scrollbar thumb.
    """

    position: int = 0
    content_length: int = 0

    def forward(self, amount: int) -> None:
        """Move towards the end of the content."""
        self.position += max(0, amount)

    def back(self, amount: int) -> None:
        """Move towards the start, stopping at zero."""
        self.position = max(0, self.position - max(0, amount))


@dataclass(slots=True)
class ScrollState:
    """Independent vertical and horizontal scroll axes.

    Every operation takes an optional amount; None scrolls by one line or
    column.
    """

    vertical: ScrollAxis = field(default_factory=ScrollAxis)
    horizontal: ScrollAxis = field(default_factory=ScrollAxis)

    def scroll_up(self, amount: int | None = None) -> None:
        self.vertical.back(1 if amount is None else amount)

    def scroll_down(self, amount: int | None = None) -> None:
        self.vertical.forward(1 if amount is None else amount)

    def scroll_left(self, amount: int | None = None) -> None:
        self.horizontal.back(1 if amount is None else amount)

    def scroll_right(self, amount: int | None = None) -> None:
        self.horizontal.forward(1 if amount is None else amount)

    def set_content(self, lines: int, width: int) -> None:
        """Record the extents of freshly captured output.

        Positions are kept so a refresh does not jump the view.
        """
        self.vertical.content_length = lines
        self.horizontal.content_length = width
