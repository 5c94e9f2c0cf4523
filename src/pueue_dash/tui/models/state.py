from __future__ import annotations

from dataclasses import dataclass, field

from pueue_dash.logging import get_logger
from pueue_dash.tui.models.editor import InputBuffer
from pueue_dash.tui.models.enums import InputMode
from pueue_dash.tui.models.output import CapturedOutput
from pueue_dash.tui.models.scroll import ScrollState

__all__ = ["DashboardState"]

logger = get_logger(__name__)


@dataclass(slots=True)
class DashboardState:
    """Everything the dashboard shows and edits.

    Owned by the app and mutated only by the input router and the refresh
    routine. ``popup_visible`` and ``input_mode`` always change together.

    Attributes:
        popup_visible: Whether the argument popup is shown.
        input_mode: NORMAL while browsing, EDITING while the popup is open.
        last_refresh: Monotonic time the last refresh started, None before
            the first one.
        output: Output of the last status command run.
        extra_args: Arguments appended to the status command.
        input: Editor buffer shown in the popup.
        scroll: Vertical and horizontal scroll positions and extents.
    """

    popup_visible: bool = False
    input_mode: InputMode = InputMode.NORMAL
    last_refresh: float | None = None
    output: CapturedOutput = field(default_factory=CapturedOutput.empty)
    extra_args: str = ""
    input: InputBuffer = field(default_factory=InputBuffer)
    scroll: ScrollState = field(default_factory=ScrollState)

    @classmethod
    def with_extra_args(cls, extra_args: str) -> DashboardState:
        """Start with ``extra_args`` applied and prefilled in the editor."""
        return cls(extra_args=extra_args, input=InputBuffer.with_text(extra_args))

    @property
    def is_editing(self) -> bool:
        return self.input_mode is InputMode.EDITING

    def toggle_popup(self) -> None:
        """Show or hide the popup, switching the input mode with it."""
        self.input_mode = (
            InputMode.EDITING if self.input_mode is InputMode.NORMAL else InputMode.NORMAL
        )
        self.popup_visible = not self.popup_visible
        logger.debug("input_mode_changed", mode=self.input_mode.value)

    def submit_input(self) -> str:
        """Use the editor text as the extra arguments and close the popup.

        The editor keeps its text so the next edit starts from it.

        Returns:
            The new extra arguments.
        """
        self.extra_args = self.input.text
        if self.popup_visible:
            self.toggle_popup()
        return self.extra_args

    def mark_refreshed(self, now: float) -> None:
        self.last_refresh = now

    def elapsed_since_refresh(self, now: float) -> float | None:
        """Seconds since the last refresh started, None if never refreshed."""
        if self.last_refresh is None:
            return None
        return now - self.last_refresh

    def apply_output(self, output: CapturedOutput) -> None:
        """Replace the captured output and recompute content extents."""
        self.output = output
        self.scroll.set_content(output.line_count, output.max_width)
