"""Fake status command runners for testing without spawning processes.

Provides:
- FakeStatusRunner: records calls and returns canned output
- fake_runner: fixture yielding a FakeStatusRunner
- FakeClock / fake_clock: manually advanced monotonic clock
"""

from __future__ import annotations

import pytest

from pueue_dash.runners.command import build_command_line
from pueue_dash.runners.models import CommandResult


class FakeStatusRunner:
    """Stand-in for StatusCommandRunner.

    Attributes:
        outputs: Stdout returned by successive runs; the last one repeats.
        error: When set, every run reports this spawn error instead.
        calls: Extra arguments of every run, in order.
    """

    def __init__(self, outputs: list[bytes] | None = None, error: str | None = None) -> None:
        self.outputs = outputs if outputs is not None else [b"queue empty\n"]
        self.error = error
        self.calls: list[str] = []
        self.status_command = "pueue"
        self.is_windows_shell = False

    async def run(self, extra_args: str = "") -> CommandResult:
        self.calls.append(extra_args)
        command = build_command_line(self.status_command, extra_args)
        if self.error is not None:
            return CommandResult(
                command=command, stdout=b"", returncode=None, duration_ms=0, error=self.error
            )
        index = min(len(self.calls), len(self.outputs)) - 1
        return CommandResult(
            command=command, stdout=self.outputs[index], returncode=0, duration_ms=1
        )


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


@pytest.fixture
def fake_runner() -> FakeStatusRunner:
    """Fixture providing a FakeStatusRunner with one line of output."""
    return FakeStatusRunner()


@pytest.fixture
def fake_clock() -> FakeClock:
    """Fixture providing a FakeClock starting at t=1000."""
    return FakeClock()
