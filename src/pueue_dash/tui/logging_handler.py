"""TUI logging handler for routing logs to toast notifications.

Stderr is unusable while Textual owns the terminal, so warnings and errors
are shown as notifications instead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pueue_dash.logging import build_formatter

if TYPE_CHECKING:
    from pueue_dash.tui.app import PueueDashApp

__all__ = ["TUILoggingHandler", "configure_tui_logging"]


class TUILoggingHandler(logging.Handler):
    """Logging handler that shows records as app notifications."""

    def __init__(self, app: PueueDashApp) -> None:
        super().__init__()
        self._app = app

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record as a notification.

        Args:
            record: The log record to emit.
        """
        try:
            severity = "error" if record.levelno >= logging.ERROR else "warning"
            message = self.format(record)
            source = record.name.split(".")[-1] if record.name else ""
            self._app.notify(message, title=source, severity=severity)
        except Exception:
            # Don't let logging errors crash the app
            self.handleError(record)


def configure_tui_logging(app: PueueDashApp, level: int = logging.WARNING) -> None:
    """Replace the stderr handler with a notification handler.

    Records below WARNING are dropped regardless of ``level``.

    Args:
        app: The PueueDashApp instance.
        level: Logging level to use.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    tui_handler = TUILoggingHandler(app)
    tui_handler.setLevel(max(level, logging.WARNING))
    tui_handler.setFormatter(build_formatter(use_json=False, colors=False))
    root_logger.addHandler(tui_handler)
