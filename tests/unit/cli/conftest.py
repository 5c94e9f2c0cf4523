"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_app() -> Generator[MagicMock, None, None]:
    """Patch PueueDashApp so no terminal UI is started.

    Yields the mocked class; ``mock_app.return_value`` is the app instance.
    """
    with (
        patch("pueue_dash.main.PueueDashApp") as app_class,
        patch("pueue_dash.main.configure_tui_logging") as tui_logging,
    ):
        app_class.return_value.return_code = 0
        app_class.configure_tui_logging = tui_logging
        yield app_class
