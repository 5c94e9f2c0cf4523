"""State models for the dashboard TUI."""

from __future__ import annotations

from pueue_dash.tui.models.editor import InputBuffer
from pueue_dash.tui.models.enums import (
    InputMode,
    KeyEventKind,
    RouterAction,
    ScrollDirection,
)
from pueue_dash.tui.models.output import CapturedOutput
from pueue_dash.tui.models.scroll import ScrollAxis, ScrollState
from pueue_dash.tui.models.state import DashboardState

__all__ = [
    "CapturedOutput",
    "DashboardState",
    "InputBuffer",
    "InputMode",
    "KeyEventKind",
    "RouterAction",
    "ScrollAxis",
    "ScrollDirection",
    "ScrollState",
]
