"""pueue-dash exception hierarchy.

All exceptions can be imported from this package:
    from pueue_dash.exceptions import ConfigError, CommandSpawnError
"""

from __future__ import annotations

from pueue_dash.exceptions.base import PueueDashError
from pueue_dash.exceptions.config import ConfigError
from pueue_dash.exceptions.runner import CommandSpawnError, RunnerError

__all__ = [
    "PueueDashError",
    "ConfigError",
    "RunnerError",
    "CommandSpawnError",
]
