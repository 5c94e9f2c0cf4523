from __future__ import annotations

from pueue_dash.exceptions.base import PueueDashError


class RunnerError(PueueDashError):
    """Base exception for status command failures.

    Attributes:
        message: Human-readable error message.
    """

    pass


class CommandSpawnError(RunnerError):
    """The shell running the status command could not be started.

    Attributes:
        message: Human-readable error message.
        command: The command line that was being run.
    """

    def __init__(self, message: str, command: str | None = None) -> None:
        """Initialize the CommandSpawnError.

        Args:
            message: Human-readable error message.
            command: The command line that was being run.
        """
        self.command = command
        super().__init__(message)
