"""Unit tests for TUI logging integration."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

from pueue_dash.tui.logging_handler import TUILoggingHandler, configure_tui_logging


def make_record(level: int, name: str = "pueue_dash.runners.command") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname=__file__,
        lineno=1,
        msg="status_command_spawn_failed",
        args=(),
        exc_info=None,
    )


class TestTUILoggingHandler:
    """Tests for TUILoggingHandler."""

    def test_warning_becomes_warning_notification(self) -> None:
        """Test warnings are shown with warning severity."""
        app = MagicMock()
        handler = TUILoggingHandler(app)
        handler.setFormatter(logging.Formatter("%(message)s"))

        handler.emit(make_record(logging.WARNING))

        app.notify.assert_called_once_with(
            "status_command_spawn_failed", title="command", severity="warning"
        )

    def test_error_becomes_error_notification(self) -> None:
        """Test errors are shown with error severity."""
        app = MagicMock()
        handler = TUILoggingHandler(app)
        handler.setFormatter(logging.Formatter("%(message)s"))

        handler.emit(make_record(logging.ERROR))

        assert app.notify.call_args.kwargs["severity"] == "error"

    def test_notify_failure_is_handled(self) -> None:
        """Test a failing notification does not raise."""
        app = MagicMock()
        app.notify.side_effect = RuntimeError("no app")
        handler = TUILoggingHandler(app)
        handler.handleError = MagicMock()

        handler.emit(make_record(logging.ERROR))

        handler.handleError.assert_called_once()


class TestConfigureTUILogging:
    """Tests for configure_tui_logging."""

    def test_replaces_root_handlers(self) -> None:
        """Test the notification handler becomes the only root handler."""
        app = MagicMock()

        configure_tui_logging(app, level=logging.DEBUG)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], TUILoggingHandler)
        assert handlers[0].level == logging.WARNING

    def test_keeps_higher_level(self) -> None:
        """Test a level above WARNING is honoured."""
        configure_tui_logging(MagicMock(), level=logging.ERROR)

        assert logging.getLogger().handlers[0].level == logging.ERROR
