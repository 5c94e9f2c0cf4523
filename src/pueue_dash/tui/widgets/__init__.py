"""Widgets for the dashboard TUI."""

from __future__ import annotations

from pueue_dash.tui.widgets.input_popup import ArgumentsPopup, InputPopup
from pueue_dash.tui.widgets.instructions import InstructionBar
from pueue_dash.tui.widgets.output_view import OutputView
from pueue_dash.tui.widgets.scrollbar import HorizontalScrollbar

__all__ = [
    "ArgumentsPopup",
    "HorizontalScrollbar",
    "InputPopup",
    "InstructionBar",
    "OutputView",
]
