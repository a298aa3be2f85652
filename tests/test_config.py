"""
Tests for Configuration and Logging Setup
=========================================
"""

import json
import logging

import pytest
import structlog


class TestConfig:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        """Should fall back to defaults when variables are unset."""
        from sms_segments.config import SegmentsConfig

        for name in ("SERVICE_NAME", "SMS_OPTOUT_LINK_LENGTH", "SMS_COST_PER_SEGMENT", "LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(name, raising=False)

        config = SegmentsConfig()

        assert config.service_name == "sms-segments"
        assert config.opt_out_link_length == 0
        assert config.cost_per_segment == pytest.approx(0.01)
        assert config.log_level == "INFO"
        assert config.log_json is True

    def test_environment_overrides(self, monkeypatch):
        from sms_segments.config import SegmentsConfig

        monkeypatch.setenv("SMS_OPTOUT_LINK_LENGTH", "24")
        monkeypatch.setenv("SMS_COST_PER_SEGMENT", "0.0075")
        monkeypatch.setenv("LOG_JSON", "false")

        config = SegmentsConfig()

        assert config.opt_out_link_length == 24
        assert config.cost_per_segment == pytest.approx(0.0075)
        assert config.log_json is False

    def test_get_config_is_cached(self, monkeypatch):
        """get_config should reuse the instance until load_config is called."""
        from sms_segments.config import get_config, load_config

        monkeypatch.setenv("SMS_OPTOUT_LINK_LENGTH", "7")
        first = get_config()
        monkeypatch.setenv("SMS_OPTOUT_LINK_LENGTH", "9")

        assert get_config() is first
        assert get_config().opt_out_link_length == 7
        assert load_config().opt_out_link_length == 9


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestLoggingSetup:
    """Tests for structlog configuration."""

    def test_json_output(self, capsys, restore_logging):
        """Events should be rendered as JSON with the service bound."""
        from sms_segments.log import setup_logging
        from sms_segments import calculate_segments

        setup_logging("smsly-test", level="DEBUG", json_output=True)
        calculate_segments("Hello", 4)

        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
        events = [json.loads(line) for line in lines]

        configured = next(e for e in events if e["event"] == "Logging configured")
        assert configured["service"] == "smsly-test"
        assert configured["level"] == "info"

        calculated = next(e for e in events if e["event"] == "Segments calculated")
        assert calculated["segments"] == 1
        assert calculated["encoding"] == "GSM-7"
        assert calculated["logger"] == "sms_segments.segmentation"

    def test_level_filters_debug(self, capsys, restore_logging):
        """Debug events should be dropped at INFO level."""
        from sms_segments.log import setup_logging
        from sms_segments import calculate_segments

        setup_logging("smsly-test", level="INFO", json_output=True)
        calculate_segments("Hello", 0)

        assert "Segments calculated" not in capsys.readouterr().out

    def test_setup_from_config(self, capsys, restore_logging):
        """Service name and renderer should come from the configuration."""
        from sms_segments.config import SegmentsConfig
        from sms_segments.log import setup_logging_from_config

        config = SegmentsConfig(service_name="smsly-sms", log_level="WARNING", log_json=True)
        setup_logging_from_config(config)

        assert logging.getLogger().level == logging.WARNING
        # The startup event is informational and filtered at WARNING
        assert "Logging configured" not in capsys.readouterr().out
