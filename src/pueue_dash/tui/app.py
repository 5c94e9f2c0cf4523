"""pueue-dash TUI application.

This module provides the PueueDashApp class: an instruction line, the
captured status output with a vertical scrollbar, and a horizontal scrollbar,
refreshed on a timer and driven by the input router.

All state changes happen on the app's message queue, one message at a time.
The status command is awaited inside the handler that triggered it, so key
presses made while it runs are handled only after it returns.
"""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.message import Message

from pueue_dash.config import DashboardConfig
from pueue_dash.logging import get_logger
from pueue_dash.runners import StatusCommandRunner
from pueue_dash.tui.models import (
    CapturedOutput,
    DashboardState,
    RouterAction,
    ScrollDirection,
)
from pueue_dash.tui.router import InputRouter, KeyInput
from pueue_dash.tui.scheduler import RefreshScheduler
from pueue_dash.tui.widgets import (
    ArgumentsPopup,
    HorizontalScrollbar,
    InstructionBar,
    OutputView,
)

__all__ = ["PollTick", "PueueDashApp"]

logger = get_logger(__name__)


class PollTick(Message):
    """Posted by the poll timer so refresh checks queue behind input events."""


class PueueDashApp(App[None]):
    """Auto-refreshing view of the status command's output.

    Args:
        config: Dashboard settings; defaults are used when omitted.
        runner: Status command runner, built from ``config`` when omitted.
        scheduler: Refresh timer policy, built from ``config`` when omitted.
    """

    TITLE = "pueue-dash"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    def __init__(
        self,
        config: DashboardConfig | None = None,
        runner: StatusCommandRunner | None = None,
        scheduler: RefreshScheduler | None = None,
    ) -> None:
        super().__init__()
        self.config = config if config is not None else DashboardConfig()
        self.runner = runner or StatusCommandRunner(self.config.status_command)
        self.scheduler = scheduler or RefreshScheduler(self.config.refresh_interval)
        self.router = InputRouter(page_size=self.config.page_size)
        self.state = DashboardState.with_extra_args(self.config.extra_args)
        self.refresh_count = 0
        self._instructions = InstructionBar(id="instructions")
        self._output_view = OutputView(id="content")
        self._horizontal_bar = HorizontalScrollbar(id="horizontal-bar")

    def compose(self) -> ComposeResult:
        yield self._instructions
        yield self._output_view
        yield self._horizontal_bar

    async def on_mount(self) -> None:
        """Run the first refresh and start polling the refresh timer."""
        logger.info(
            "dashboard_started",
            status_command=self.runner.status_command,
            windows_shell=self.runner.is_windows_shell,
            refresh_interval=self.scheduler.interval,
        )
        await self.refresh_output()
        self.set_interval(self.config.poll_interval, self._post_poll_tick)

    def _post_poll_tick(self) -> None:
        self.post_message(PollTick())

    async def on_poll_tick(self, message: PollTick) -> None:
        """Refresh when the interval has passed and the popup is closed."""
        if self.scheduler.is_due(self.state):
            await self.refresh_output()

    async def refresh_output(self) -> None:
        """Run the status command and show its output.

        The timer reference is reset before the command starts.
        """
        self.state.mark_refreshed(self.scheduler.now())
        logger.debug("refresh_started", extra_args=self.state.extra_args)
        result = await self.runner.run(self.state.extra_args)
        self.state.apply_output(CapturedOutput.from_result(result))
        self.refresh_count += 1
        logger.debug(
            "refresh_finished",
            lines=self.state.output.line_count,
            width=self.state.output.max_width,
            returncode=result.returncode,
        )
        self._sync_view()

    async def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        action = self.router.handle_key(self.state, KeyInput.from_event(event))
        await self._apply(action)

    def on_resize(self, event: events.Resize) -> None:
        # viewport sizes are only known after layout
        self.call_after_refresh(self._sync_view)

    async def on_paste(self, event: events.Paste) -> None:
        event.stop()
        await self._apply(self.router.handle_paste(self.state, event.text))

    async def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        await self._scroll(ScrollDirection.DOWN, event)

    async def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        await self._scroll(ScrollDirection.UP, event)

    async def on_mouse_scroll_left(self, event: events.MouseScrollLeft) -> None:
        await self._scroll(ScrollDirection.LEFT, event)

    async def on_mouse_scroll_right(self, event: events.MouseScrollRight) -> None:
        await self._scroll(ScrollDirection.RIGHT, event)

    async def _scroll(self, direction: ScrollDirection, event: events.MouseEvent) -> None:
        event.stop()
        await self._apply(self.router.handle_scroll(self.state, direction, ctrl=event.ctrl))

    async def _apply(self, action: RouterAction) -> None:
        self._sync_view()
        if action is RouterAction.QUIT:
            self.exit()
        elif action is RouterAction.REFRESH:
            await self.refresh_output()

    def _sync_view(self) -> None:
        """Push the current state into the widgets."""
        scroll = self.state.scroll
        self._instructions.popup_visible = self.state.popup_visible
        self._output_view.update_view(self.state.output, scroll.vertical, scroll.horizontal)
        self._horizontal_bar.update_axis(
            scroll.horizontal,
            viewport_length=self._output_view.viewport_width or None,
        )
        self._sync_popup()

    def _sync_popup(self) -> None:
        popup_open = isinstance(self.screen, ArgumentsPopup)
        if self.state.popup_visible and not popup_open:
            self.push_screen(
                ArgumentsPopup(
                    self.state.input,
                    width_percent=self.config.popup_width_percent,
                )
            )
        elif not self.state.popup_visible and popup_open:
            self.pop_screen()
        elif popup_open:
            assert isinstance(self.screen, ArgumentsPopup)
            self.screen.update_buffer(self.state.input, editing=self.state.is_editing)
