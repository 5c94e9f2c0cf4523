"""Unit tests for RefreshScheduler."""

from __future__ import annotations

from pueue_dash.tui.models import DashboardState
from pueue_dash.tui.scheduler import RefreshScheduler
from tests.fixtures.runners import FakeClock


class TestRefreshScheduler:
    """Tests for deciding when a refresh is due."""

    def test_due_before_first_refresh(self, fake_clock: FakeClock) -> None:
        """Test the first check is due immediately."""
        scheduler = RefreshScheduler(interval=5.0, clock=fake_clock)

        assert scheduler.is_due(DashboardState()) is True

    def test_not_due_within_interval(self, fake_clock: FakeClock) -> None:
        """Test nothing is due until the interval has passed."""
        scheduler = RefreshScheduler(interval=5.0, clock=fake_clock)
        state = DashboardState()
        state.mark_refreshed(scheduler.now())

        fake_clock.advance(5.0)
        assert scheduler.is_due(state) is False

        fake_clock.advance(0.01)
        assert scheduler.is_due(state) is True

    def test_popup_blocks_refresh(self, fake_clock: FakeClock) -> None:
        """Test an open popup suppresses the refresh and keeps the reference."""
        scheduler = RefreshScheduler(interval=5.0, clock=fake_clock)
        state = DashboardState()
        state.mark_refreshed(scheduler.now())
        reference = state.last_refresh
        state.toggle_popup()

        fake_clock.advance(60.0)

        assert scheduler.is_due(state) is False
        assert state.last_refresh == reference

        state.toggle_popup()
        assert scheduler.is_due(state) is True

    def test_explicit_now(self) -> None:
        """Test an explicit time overrides the clock."""
        scheduler = RefreshScheduler(interval=1.0, clock=lambda: 0.0)
        state = DashboardState()
        state.mark_refreshed(10.0)

        assert scheduler.is_due(state, now=10.5) is False
        assert scheduler.is_due(state, now=12.0) is True
