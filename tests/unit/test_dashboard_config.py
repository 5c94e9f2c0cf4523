"""Unit tests for DashboardConfig and build_config."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pueue_dash.config import DashboardConfig, build_config
from pueue_dash.exceptions import ConfigError


class TestDashboardConfig:
    """Tests for DashboardConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Test defaults match the standard pueue setup."""
        config = DashboardConfig()

        assert config.status_command == "pueue"
        assert config.refresh_interval == 5.0
        assert config.poll_interval == 0.25
        assert config.page_size == 20
        assert config.popup_width_percent == 60
        assert config.extra_args == ""

    def test_frozen(self) -> None:
        """Test config values cannot be changed after creation."""
        config = DashboardConfig()

        with pytest.raises(ValidationError):
            config.page_size = 5

    def test_unknown_field_rejected(self) -> None:
        """Test misspelled options are not silently ignored."""
        with pytest.raises(ValidationError):
            DashboardConfig(pagesize=5)

    def test_status_command_is_stripped(self) -> None:
        """Test surrounding whitespace is removed from the command."""
        assert DashboardConfig(status_command="  pueue ").status_command == "pueue"

    def test_blank_status_command_rejected(self) -> None:
        """Test a whitespace-only command is rejected."""
        with pytest.raises(ValidationError):
            DashboardConfig(status_command="   ")

    @pytest.mark.parametrize(
        "options",
        [
            {"refresh_interval": 0},
            {"refresh_interval": -1.0},
            {"poll_interval": 0},
            {"page_size": 0},
            {"page_size": 1001},
            {"popup_width_percent": 5},
            {"extra_args": "a\nb"},
        ],
    )
    def test_invalid_values(self, options: dict) -> None:
        """Test out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            DashboardConfig(**options)


class TestBuildConfig:
    """Tests for build_config."""

    def test_none_values_use_defaults(self) -> None:
        """Test options left unset fall back to defaults."""
        config = build_config(status_command=None, page_size=None, extra_args="-g ci")

        assert config.status_command == "pueue"
        assert config.page_size == 20
        assert config.extra_args == "-g ci"

    def test_validation_error_becomes_config_error(self) -> None:
        """Test invalid options raise ConfigError naming the field."""
        with pytest.raises(ConfigError) as exc_info:
            build_config(page_size=0)

        error = exc_info.value
        assert error.field == "page_size"
        assert error.value == 0
        assert error.message.startswith("Invalid configuration:")
        assert isinstance(error.__cause__, ValidationError)
