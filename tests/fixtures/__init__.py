"""Shared test fixtures for the pueue-dash test suite.

Runner Fakes (from tests/fixtures/runners.py)
---------------------------------------------

Classes:
    FakeStatusRunner: Records extra arguments and returns canned stdout, or a
        spawn error when ``error`` is set.

    FakeClock: Monotonic clock advanced with ``advance(seconds)``.

Fixtures:
    fake_runner: A FakeStatusRunner returning ``b"queue empty\\n"``.
    fake_clock: A FakeClock starting at t=1000.

Example:
    >>> @pytest.mark.asyncio
    ... async def test_refresh(fake_runner):
    ...     result = await fake_runner.run("--group ci")
    ...     assert fake_runner.calls == ["--group ci"]
"""

from __future__ import annotations

from tests.fixtures.runners import (
    FakeClock,
    FakeStatusRunner,
    fake_clock,
    fake_runner,
)

__all__ = [
    "FakeClock",
    "FakeStatusRunner",
    "fake_clock",
    "fake_runner",
]
