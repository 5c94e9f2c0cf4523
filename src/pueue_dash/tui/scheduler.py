from __future__ import annotations

import time
from collections.abc import Callable

from pueue_dash.constants import DEFAULT_REFRESH_INTERVAL
from pueue_dash.tui.models import DashboardState

__all__ = ["RefreshScheduler"]


class RefreshScheduler:
    """Decide when the status command is due to run again.

    A refresh is due once more than ``interval`` seconds have passed since
    the last one started, unless the popup is open. The first check is due
    immediately.

    Args:
        interval: Seconds between refreshes.
        clock: Monotonic time source.
    """

    def __init__(
        self,
        interval: float = DEFAULT_REFRESH_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval = interval
        self._clock = clock

    def now(self) -> float:
        return self._clock()

    def is_due(self, state: DashboardState, now: float | None = None) -> bool:
        """Check the timer without touching it."""
        if state.popup_visible:
            return False
        elapsed = state.elapsed_since_refresh(self.now() if now is None else now)
        return elapsed is None or elapsed > self.interval
