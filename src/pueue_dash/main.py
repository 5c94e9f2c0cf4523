"""CLI entry point for pueue-dash.

This module defines the Click-based command that starts the dashboard.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from pathlib import Path

import click

from pueue_dash import __version__
from pueue_dash.config import build_config
from pueue_dash.exceptions import ConfigError
from pueue_dash.logging import bind_context, configure_logging, get_logger
from pueue_dash.tui.app import PueueDashApp
from pueue_dash.tui.logging_handler import configure_tui_logging

__all__ = ["ExitCode", "cli"]

logger = get_logger(__name__)


class ExitCode(IntEnum):
    """Exit codes for pueue-dash.

    - 0 when the user quits
    - 1 for invalid options
    - 130 for keyboard interrupt (128 + SIGINT=2)
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


def resolve_log_level(verbose: int, quiet: bool) -> int:
    """Map -v/-q flags to a log level; quiet wins over verbose."""
    if quiet:
        return logging.ERROR
    if verbose == 0:
        return logging.WARNING
    return logging.INFO if verbose == 1 else logging.DEBUG


@click.command()
@click.version_option(version=__version__, prog_name="pueue-dash")
@click.option(
    "--command",
    "status_command",
    default=None,
    help="Status executable to run (default: pueue).",
)
@click.option(
    "--interval",
    "refresh_interval",
    type=float,
    default=None,
    help="Seconds between refreshes (default: 5).",
)
@click.option(
    "--page-size",
    type=int,
    default=None,
    help="Lines moved by PageUp/PageDown and columns by Home/End (default: 20).",
)
@click.option(
    "--args",
    "extra_args",
    default=None,
    help="Initial extra arguments for the status command.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this file instead of showing warnings as notifications.",
)
@click.option(
    "--json-logs",
    is_flag=True,
    default=False,
    help="Write log file entries as JSON lines.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only log errors.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    status_command: str | None,
    refresh_interval: float | None,
    page_size: int | None,
    extra_args: str | None,
    log_file: Path | None,
    json_logs: bool,
    verbose: int,
    quiet: bool,
) -> None:
    """pueue-dash - watch `pueue status` in a scrollable terminal view.

    Press i to edit extra arguments for the status command, q or Esc to quit.
    """
    try:
        config = build_config(
            status_command=status_command,
            refresh_interval=refresh_interval,
            page_size=page_size,
            extra_args=extra_args,
        )
    except ConfigError as e:
        error_parts = [f"Error: {e.message}"]
        if e.field:
            error_parts.append(f"  Field: {e.field}")
        if e.value is not None:
            error_parts.append(f"  Value: {e.value}")
        click.echo("\n".join(error_parts), err=True)
        ctx.exit(ExitCode.FAILURE)

    level = resolve_log_level(verbose, quiet)
    configure_logging(level=level, log_file=log_file, force_json=json_logs)
    bind_context(status_command=config.status_command)

    app = PueueDashApp(config)
    if log_file is None:
        configure_tui_logging(app, level=level)

    try:
        app.run()
    except KeyboardInterrupt:
        ctx.exit(ExitCode.INTERRUPTED)

    logger.info("dashboard_stopped", return_code=app.return_code)
    ctx.exit(app.return_code or ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
