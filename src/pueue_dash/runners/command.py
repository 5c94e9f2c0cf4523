"""Runner for the external status command.

The command line is handed to the platform shell verbatim, so the extra
arguments typed by the user may contain anything the shell understands.
"""

from __future__ import annotations

import asyncio
import sys
import time
from collections.abc import Sequence

from pueue_dash.constants import (
    COMMAND_NOT_FOUND_EXIT_CODES,
    DEFAULT_STATUS_COMMAND,
    STATUS_ARGUMENTS,
)
from pueue_dash.exceptions import CommandSpawnError
from pueue_dash.logging import get_logger
from pueue_dash.runners.models import CommandResult

__all__ = ["StatusCommandRunner", "build_command_line", "default_shell"]

logger = get_logger(__name__)


def default_shell(is_windows: bool | None = None) -> tuple[str, ...]:
    """Shell interpreter and flag used to run a command string.

    Args:
        is_windows: Override platform detection.

    Returns:
        ("cmd", "/C") on Windows, ("sh", "-c") elsewhere.
    """
    if is_windows is None:
        is_windows = sys.platform == "win32"
    return ("cmd", "/C") if is_windows else ("sh", "-c")


def build_command_line(status_command: str, extra_args: str = "") -> str:
    """Build the shell command string for a status query.

    Extra arguments are appended without escaping or validation.

    Example:
        >>> build_command_line("pueue", "--group ci")
        'pueue --color always status --group ci'
    """
    return f"{status_command} {STATUS_ARGUMENTS} {extra_args}"


class StatusCommandRunner:
    """Run the status command through the shell and capture its stdout.

    Stderr is discarded and the exit code is only reported, never acted on,
    except for the shell's "command not found" codes with no output. Those and
    a shell that cannot be spawned are reported in the result's ``error``
    instead of raising, so the dashboard can keep running.

    Attributes:
        status_command: Executable queried for status.

    Example:
        ```python
        runner = StatusCommandRunner("pueue")
        result = await runner.run("--group ci")
        if result.spawned:
            print(result.stdout.decode())
        ```
    """

    def __init__(
        self,
        status_command: str = DEFAULT_STATUS_COMMAND,
        shell: Sequence[str] | None = None,
    ) -> None:
        self._status_command = status_command
        self._shell = tuple(shell) if shell is not None else default_shell()

    @property
    def status_command(self) -> str:
        """Executable queried for status."""
        return self._status_command

    @property
    def is_windows_shell(self) -> bool:
        """True when commands run through cmd.exe."""
        return self._shell[:1] == ("cmd",)

    async def run(self, extra_args: str = "") -> CommandResult:
        """Run the status command once.

        Blocks the awaiting handler until the process exits; there is no
        timeout and no cancellation.

        Args:
            extra_args: Text appended verbatim to the command line.

        Returns:
            CommandResult with captured stdout, or with ``error`` set if the
            shell could not be started or could not find the status command.
        """
        command = build_command_line(self._status_command, extra_args)
        start = time.monotonic()
        try:
            stdout, returncode = await self._execute(command)
        except CommandSpawnError as e:
            duration_ms = int((time.monotonic() - start) * 1000)
            logger.error("status_command_spawn_failed", command=command, error=e.message)
            return CommandResult(
                command=command,
                stdout=b"",
                returncode=None,
                duration_ms=duration_ms,
                error=e.message,
            )

        duration_ms = int((time.monotonic() - start) * 1000)
        if returncode in COMMAND_NOT_FOUND_EXIT_CODES and not stdout:
            message = (
                f"{self._status_command!r} not found or not executable (exit {returncode})"
            )
            logger.error("status_command_not_found", command=command, returncode=returncode)
            return CommandResult(
                command=command,
                stdout=stdout,
                returncode=returncode,
                duration_ms=duration_ms,
                error=message,
            )
        if returncode != 0:
            logger.debug(
                "status_command_nonzero_exit",
                command=command,
                returncode=returncode,
            )
        logger.debug(
            "status_command_finished",
            command=command,
            bytes=len(stdout),
            duration_ms=duration_ms,
        )
        return CommandResult(
            command=command,
            stdout=stdout,
            returncode=returncode,
            duration_ms=duration_ms,
        )

    async def _execute(self, command: str) -> tuple[bytes, int]:
        """Spawn the shell and wait for it.

        Raises:
            CommandSpawnError: If the shell cannot be started.
        """
        try:
            process = await asyncio.create_subprocess_exec(
                *self._shell,
                command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            raise CommandSpawnError(
                f"Failed to execute {self._shell[0]!r}: {e.strerror or e}",
                command=command,
            ) from e

        stdout, _ = await process.communicate()
        return stdout, process.returncode if process.returncode is not None else -1
