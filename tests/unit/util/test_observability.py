"""Unit tests for logfire and logging setup."""

import logging
from unittest.mock import patch

import pytest

from nexus.config import ObservabilitySettings, Settings
from nexus.util.logging import QUIET_LOGGERS, setup_logging
from nexus.util.observability import (
    SERVICE_NAME,
    configure_logfire,
    should_send_to_logfire,
)


class TestShouldSendToLogfire:
    """Tests for the telemetry export decision."""

    @pytest.mark.parametrize(
        "token,explicit,expected",
        [
            (None, None, False),
            ("lf-token", None, True),
            ("lf-token", False, False),
            (None, True, True),
        ],
    )
    def test_explicit_setting_wins_over_token(self, token, explicit, expected):
        settings = Settings(
            observability=ObservabilitySettings(
                logfire_token=token, send_to_logfire=explicit
            )
        )

        assert should_send_to_logfire(settings) is expected


class TestConfigureLogfire:
    """Tests for configure_logfire."""

    def test_configures_service_identity(self):
        settings = Settings(
            environment="staging",
            observability=ObservabilitySettings(logfire_token="lf-token"),
        )

        with patch("nexus.util.observability.logfire") as mock_logfire:
            configure_logfire(settings)

        kwargs = mock_logfire.configure.call_args.kwargs
        assert kwargs["service_name"] == SERVICE_NAME
        assert kwargs["service_version"] == settings.git_sha
        assert kwargs["environment"] == "staging"
        assert kwargs["send_to_logfire"] is True
        assert kwargs["token"] == "lf-token"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_debug_lowers_root_level_and_quiets_clients(self):
        setup_logging(Settings(debug=True))

        assert logging.getLogger().level == logging.DEBUG
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_default_level_is_info(self):
        setup_logging(Settings(debug=False))

        assert logging.getLogger().level == logging.INFO
