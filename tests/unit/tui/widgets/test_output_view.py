"""Unit tests for the OutputView widget."""

from __future__ import annotations

import pytest
from textual.app import App

from pueue_dash.tui.models import CapturedOutput, ScrollAxis
from pueue_dash.tui.widgets import OutputView

FIVE_LINES = b"".join(f"line{i}\n".encode() for i in range(5))


def make_view(
    output: CapturedOutput, vertical: int = 0, horizontal: int = 0
) -> OutputView:
    view = OutputView()
    view.output = output
    view.vertical = ScrollAxis(vertical, output.line_count)
    view.horizontal = ScrollAxis(horizontal, output.max_width)
    return view


class OutputViewTestApp(App):
    """Test app for OutputView."""

    def compose(self):
        yield OutputView()


class TestVisibleRows:
    """Tests for OutputView.visible_rows."""

    def test_rows_with_scrollbar(self) -> None:
        """Test lines fill the width left of the vertical scrollbar."""
        view = make_view(CapturedOutput.from_bytes(FIVE_LINES))

        rows = view.visible_rows(width=10, height=3)

        assert [row.plain for row in rows] == [
            "line0    ▲",
            "line1    █",
            "line2    ▼",
        ]

    def test_vertical_offset(self) -> None:
        """Test the first row is the line at the vertical position."""
        view = make_view(CapturedOutput.from_bytes(FIVE_LINES), vertical=3)

        rows = view.visible_rows(width=10, height=3)

        assert rows[0].plain.startswith("line3")
        assert rows[1].plain.startswith("line4")
        assert rows[2].plain[:9] == " " * 9

    def test_horizontal_offset(self) -> None:
        """Test rows are shifted by the horizontal position."""
        view = make_view(CapturedOutput.from_bytes(FIVE_LINES), horizontal=2)

        rows = view.visible_rows(width=10, height=3)

        assert rows[0].plain.startswith("ne0 ")

    def test_scrolled_past_end_is_blank(self) -> None:
        """Test positions beyond the content render blank rows."""
        view = make_view(CapturedOutput.from_bytes(FIVE_LINES), vertical=50, horizontal=50)

        rows = view.visible_rows(width=10, height=3)

        assert len(rows) == 3
        assert all(row.plain[:9] == " " * 9 for row in rows)
        assert rows[-1].plain[-1] == "▼"

    def test_empty_output(self) -> None:
        """Test empty output renders blank rows without a scrollbar."""
        view = make_view(CapturedOutput.empty())

        rows = view.visible_rows(width=6, height=2)

        assert [row.plain for row in rows] == ["      ", "      "]

    def test_error_banner(self) -> None:
        """Test a spawn error is shown on the first row."""
        view = make_view(CapturedOutput.from_error("Failed to execute 'sh'"))

        rows = view.visible_rows(width=30, height=2)

        assert "Failed to execute 'sh'" in rows[0].plain
        assert str(rows[0].style) == OutputView.ERROR_STYLE
        assert rows[1].plain == " " * 30

    def test_no_room(self) -> None:
        """Test a zero-sized viewport has no rows."""
        view = make_view(CapturedOutput.from_bytes(FIVE_LINES))

        assert view.visible_rows(width=0, height=3) == []
        assert view.visible_rows(width=10, height=0) == []


class TestOutputViewWidget:
    """Tests for OutputView inside an app."""

    @pytest.mark.asyncio
    async def test_update_view_renders(self) -> None:
        """Test updated output is rendered at the widget size."""
        async with OutputViewTestApp().run_test(size=(20, 6)) as pilot:
            view = pilot.app.query_one(OutputView)
            output = CapturedOutput.from_bytes(FIVE_LINES)

            view.update_view(output, ScrollAxis(1, 5), ScrollAxis(0, 5))
            await pilot.pause()

            rendered = view.render()
            assert rendered.plain.splitlines()[0].startswith("line1")
            assert view.vertical.position == 1


class TestTextWidth:
    """Tests for OutputView.text_width."""

    def test_scrollbar_takes_one_column(self) -> None:
        """Test output with lines leaves one column for the scrollbar."""
        view = make_view(CapturedOutput.from_bytes(FIVE_LINES))

        assert view.text_width(10, 3) == 9

    def test_full_width_without_content(self) -> None:
        """Test empty output uses every column."""
        view = make_view(CapturedOutput.empty())

        assert view.text_width(10, 3) == 10
