from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

# Register fixture plugins from tests/fixtures/
pytest_plugins = [
    "tests.fixtures.runners",
]


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for test environment.

    Logs go to stderr at WARNING level so they never mix with test stdout.
    """
    from pueue_dash.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield
