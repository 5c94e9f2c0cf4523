"""Data models for the status command runner."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CommandResult"]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of one status command run.

    Attributes:
        command: The full command line handed to the shell.
        stdout: Raw standard output; stderr is never captured.
        returncode: Exit code, or None when the shell could not be spawned.
        duration_ms: Execution time in milliseconds.
        error: Why the command did not run, None when it did.
    """

    command: str
    stdout: bytes
    returncode: int | None
    duration_ms: int
    error: str | None = None

    @property
    def success(self) -> bool:
        """True if the command ran and exited with code 0."""
        return self.error is None and self.returncode == 0

    @property
    def spawned(self) -> bool:
        """True if the status command was started."""
        return self.error is None
