"""
Tests for channel-aware logging.
"""

import logging
import subprocess
import sys

import pytest

from formcheck import validate
from formcheck.core.logging import (
    LogChannel,
    LogLevel,
    configure_logging,
    get_current_config,
    get_logger,
)


class TestParsing:
    """String parsing for levels and channels."""

    @pytest.mark.parametrize("text,level", [
        ("silent", LogLevel.SILENT),
        ("INFO", LogLevel.INFO),
        ("verbose", LogLevel.VERBOSE),
        ("debug", LogLevel.DEBUG),
        ("warning", LogLevel.INFO),
        ("nonsense", LogLevel.INFO),
    ])
    def test_level_from_string(self, text, level):
        """Verify level names map to LogLevel."""
        assert LogLevel.from_string(text) == level

    def test_channel_from_string(self):
        """Verify channel names are case-insensitive."""
        assert LogChannel.from_string("dispatch") is LogChannel.DISPATCH
        assert LogChannel.from_string("nope") is None


class TestConfigure:
    """configure_logging() behaviour."""

    def test_explicit_settings(self):
        """Verify explicit arguments are applied."""
        configure_logging(level="debug", format="json", channels=["dispatch", "validate"], force=True)

        assert get_current_config() == {
            "level": "DEBUG",
            "format": "json",
            "channels": ["DISPATCH", "VALIDATE"],
        }

    def test_unknown_channels_ignored(self):
        """Verify bad channel names are dropped."""
        configure_logging(channels=["system", "bogus"], force=True)

        assert get_current_config()["channels"] == ["SYSTEM"]

    def test_environment(self, monkeypatch):
        """Verify FORMCHECK_* variables are read when arguments are absent."""
        monkeypatch.setenv("FORMCHECK_LOG_LEVEL", "verbose")
        monkeypatch.setenv("FORMCHECK_LOG_CHANNELS", "messages")

        configure_logging(force=True)

        config = get_current_config()
        assert config["level"] == "VERBOSE"
        assert config["channels"] == ["MESSAGES"]

    def test_not_reconfigured_without_force(self):
        """Verify a second call without force is a no-op."""
        configure_logging(level="debug", force=True)
        configure_logging(level="silent")

        assert get_current_config()["level"] == "DEBUG"


class TestChannelLogger:
    """Level and channel filtering."""

    def test_channel_filter(self):
        """Verify loggers outside the enabled channels stay quiet."""
        configure_logging(level="debug", channels=["system"], force=True)

        assert get_logger(LogChannel.SYSTEM)._should_log(LogLevel.DEBUG) is True
        assert get_logger(LogChannel.DISPATCH)._should_log(LogLevel.INFO) is False

    def test_level_filter(self):
        """Verify messages above the configured level are skipped."""
        configure_logging(level="info", force=True)

        logger = get_logger("validate")
        assert logger._should_log(LogLevel.INFO) is True
        assert logger._should_log(LogLevel.VERBOSE) is False

    def test_string_channel_falls_back_to_system(self):
        """Verify an unknown channel name yields a SYSTEM logger."""
        assert get_logger("bogus").channel is LogChannel.SYSTEM


class TestBatchLogging:
    """Dispatcher log output."""

    def test_values_never_logged(self, capsys):
        """Verify raw field values do not reach the log stream."""
        configure_logging(level="debug", format="json", force=True)

        validate([
            {"kind": "emailAddress", "value": "secret.person@example.com"},
            {"kind": "emailAddress", "value": 12345},
            {"kind": "mystery", "value": "hidden-value"},
        ])

        err = capsys.readouterr().err
        assert "batch_completed" in err
        assert "unknown_kind" in err
        assert "secret.person" not in err
        assert "hidden-value" not in err

    def test_silent_logs_nothing(self, capsys):
        """Verify SILENT suppresses even warnings."""
        configure_logging(level="silent", force=True)

        get_logger(LogChannel.SYSTEM).warning("should_not_appear")
        validate([{"kind": "mystery", "value": 1}])

        assert capsys.readouterr().err == ""


IMPORT_KEEPS_HANDLERS = """
import logging
import sys

import structlog

handler = logging.StreamHandler(sys.stderr)
logging.getLogger().addHandler(handler)

import formcheck

formcheck.validate([{"kind": "properName", "value": "Kalle"}, {"kind": "nope"}])
print(handler in logging.getLogger().handlers, structlog.is_configured())
"""


class TestHostConfiguration:
    """Library use leaves the host's logging alone."""

    def test_import_keeps_root_handlers(self):
        """Verify importing and using formcheck does not reconfigure logging."""
        result = subprocess.run(
            [sys.executable, "-c", IMPORT_KEEPS_HANDLERS],
            capture_output=True,
            text=True,
            check=True,
        )

        assert result.stdout.split() == ["True", "False"]

    def test_get_logger_does_not_configure(self):
        """Verify get_logger() never touches the root logger."""
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            get_logger(LogChannel.VALIDATE).debug("logger_created")
            validate([{"kind": "emailAddress", "value": 5}])

            assert handler in root.handlers
        finally:
            root.removeHandler(handler)
