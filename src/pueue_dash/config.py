from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pueue_dash.constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_POPUP_WIDTH_PERCENT,
    DEFAULT_REFRESH_INTERVAL,
    DEFAULT_STATUS_COMMAND,
)
from pueue_dash.exceptions import ConfigError
from pueue_dash.logging import get_logger

__all__ = [
    "DashboardConfig",
    "build_config",
]

logger = get_logger(__name__)


class DashboardConfig(BaseModel):
    """Settings for one dashboard session.

    Built from command-line options only; nothing is read from files or the
    environment.

    Attributes:
        status_command: Executable (or shell snippet) queried for status.
        refresh_interval: Seconds between automatic refreshes.
        poll_interval: Seconds between checks of the refresh timer.
        page_size: Lines or columns moved by PageUp/PageDown/Home/End.
        popup_width_percent: Width of the argument popup.
        extra_args: Initial extra arguments, also prefilled in the editor.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_command: str = Field(default=DEFAULT_STATUS_COMMAND, min_length=1)
    refresh_interval: float = Field(default=DEFAULT_REFRESH_INTERVAL, gt=0.0)
    poll_interval: float = Field(default=DEFAULT_POLL_INTERVAL, gt=0.0, le=5.0)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=1000)
    popup_width_percent: int = Field(
        default=DEFAULT_POPUP_WIDTH_PERCENT, ge=10, le=100
    )
    extra_args: str = ""

    @field_validator("status_command")
    @classmethod
    def check_status_command(cls, v: str) -> str:
        """Reject commands made only of whitespace."""
        if not v.strip():
            raise ValueError("status command must not be blank")
        return v.strip()

    @field_validator("extra_args")
    @classmethod
    def check_single_line(cls, v: str) -> str:
        """The editor holds a single line, so newlines cannot be prefilled."""
        if "\n" in v or "\r" in v:
            raise ValueError("extra arguments must be a single line")
        return v


def build_config(**options: Any) -> DashboardConfig:
    """Build a validated configuration from CLI options.

    Options whose value is None fall back to the defaults.

    Args:
        **options: Field values keyed by DashboardConfig field name.

    Returns:
        DashboardConfig instance.

    Raises:
        ConfigError: If any option is invalid.
    """
    given = {key: value for key, value in options.items() if value is not None}
    try:
        config = DashboardConfig(**given)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e

    logger.debug("config_built", **config.model_dump())
    return config
