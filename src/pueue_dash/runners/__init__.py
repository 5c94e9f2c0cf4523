"""Status command runner and its result model."""

from __future__ import annotations

from pueue_dash.runners.command import (
    StatusCommandRunner,
    build_command_line,
    default_shell,
)
from pueue_dash.runners.models import CommandResult

__all__ = [
    "CommandResult",
    "StatusCommandRunner",
    "build_command_line",
    "default_shell",
]
