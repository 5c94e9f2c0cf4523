"""pueue-dash TUI package.

Exports the Textual application and its state models.
"""

from __future__ import annotations

from pueue_dash.tui.app import PueueDashApp
from pueue_dash.tui.models import DashboardState, InputMode
from pueue_dash.tui.router import InputRouter, KeyInput
from pueue_dash.tui.scheduler import RefreshScheduler

__all__ = [
    "DashboardState",
    "InputMode",
    "InputRouter",
    "KeyInput",
    "PueueDashApp",
    "RefreshScheduler",
]
