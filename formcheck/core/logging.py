"""
Channel-Aware Structured Logging for formcheck.

Semantic channels with level-based filtering:
- DISPATCH: batch start/end, unknown kinds, contained handler errors
- VALIDATE: per-kind validator decisions
- SANITIZE: sanitizer activity
- MESSAGES: message catalog loading
- SYSTEM: errors, warnings, status

Log Levels:
- SILENT (0): No logging
- INFO (1): Key milestones only
- VERBOSE (2): Detailed operations
- DEBUG (3): Everything

Configuration via environment:
- FORMCHECK_LOG_LEVEL: Global level (silent/info/verbose/debug)
- FORMCHECK_LOG_FORMAT: Output format (console/json)
- FORMCHECK_LOG_CHANNELS: Comma-separated channel filter (all if not set)

Importing formcheck configures nothing. The host application (or the
formcheck CLI) calls configure_logging(); until then records go through
whatever structlog configuration is already in place.

Field values are user data (names, emails, phone numbers).
Log kinds, indices, lengths and codes, never the values themselves.
"""

import logging
import os
import sys
import time
from enum import Enum, IntEnum
from typing import Any, Optional, Union

import structlog


# =============================================================================
# Enums
# =============================================================================

class LogLevel(IntEnum):
    """Log verbosity levels."""
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def from_string(cls, s: str) -> "LogLevel":
        """Parse log level from string."""
        mapping = {
            "silent": cls.SILENT,
            "info": cls.INFO,
            "verbose": cls.VERBOSE,
            "debug": cls.DEBUG,
            # stdlib compatibility
            "warning": cls.INFO,
            "error": cls.INFO,
        }
        return mapping.get(s.lower(), cls.INFO)


class LogChannel(str, Enum):
    """Semantic log channels."""
    DISPATCH = "DISPATCH"     # Batch orchestration
    VALIDATE = "VALIDATE"     # Field validators
    SANITIZE = "SANITIZE"     # String/HTML sanitizers
    MESSAGES = "MESSAGES"     # Message catalog
    SYSTEM = "SYSTEM"         # Errors, warnings, status

    @classmethod
    def all(cls) -> list["LogChannel"]:
        """Return all channels."""
        return list(cls)

    @classmethod
    def from_string(cls, s: str) -> Optional["LogChannel"]:
        """Parse channel from string."""
        try:
            return cls(s.upper())
        except ValueError:
            return None


# =============================================================================
# Configuration
# =============================================================================

_config = {
    "level": LogLevel.INFO,
    "format": "console",
    "channels": set(LogChannel.all()),
    "configured": False,
}


def _parse_channels(channels: list[Union[LogChannel, str]]) -> list[LogChannel]:
    parsed = []
    for ch in channels:
        if isinstance(ch, str):
            ch = LogChannel.from_string(ch.strip())
        if ch:
            parsed.append(ch)
    return parsed


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    format: str = None,
    channels: list[Union[LogChannel, str]] = None,
    force: bool = False,
) -> None:
    """
    Configure the logging system.

    Replaces the root handlers and the global structlog setup, so only
    applications call this (the CLI does); library code never does.

    Args:
        level: Log level (LogLevel enum or string)
        format: Output format ("console" or "json")
        channels: List of channels to enable (all if None)
        force: Force reconfiguration if already configured
    """
    if _config["configured"] and not force:
        return

    if level is None:
        level = LogLevel.from_string(os.environ.get("FORMCHECK_LOG_LEVEL", "info"))
    elif isinstance(level, str):
        level = LogLevel.from_string(level)

    if format is None:
        format = os.environ.get("FORMCHECK_LOG_FORMAT", "console")

    if channels is None:
        channels_str = os.environ.get("FORMCHECK_LOG_CHANNELS", "")
        parsed = _parse_channels(channels_str.split(",")) if channels_str else []
        channels = parsed or LogChannel.all()
    else:
        channels = _parse_channels(channels)

    _config["level"] = level
    _config["format"] = format
    _config["channels"] = set(channels)

    stdlib_level = {
        LogLevel.SILENT: logging.CRITICAL + 10,  # Above critical = nothing
        LogLevel.INFO: logging.INFO,
        LogLevel.VERBOSE: logging.DEBUG,
        LogLevel.DEBUG: logging.DEBUG,
    }.get(level, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=stdlib_level,
        force=True,
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _config["configured"] = True


# =============================================================================
# Channel Logger
# =============================================================================

class ChannelLogger:
    """
    A logger bound to a specific channel.

    Provides level-aware logging methods:
    - verbose(): Detailed operations (level >= VERBOSE)
    - debug(): Everything (level >= DEBUG)
    - warning(): Always logged (unless SILENT)
    """

    def __init__(self, channel: LogChannel, name: str = None):
        self.channel = channel
        self.name = name or f"formcheck.{channel.value.lower()}"
        self._logger = structlog.get_logger(self.name)

    def _should_log(self, msg_level: LogLevel) -> bool:
        if self.channel not in _config["channels"]:
            return False
        return _config["level"] >= msg_level

    def _make_event(self, **kwargs) -> dict:
        return {"channel": self.channel.value, **kwargs}

    def verbose(self, event: str, **kwargs) -> None:
        """Log at VERBOSE level (detailed operations)."""
        if not self._should_log(LogLevel.VERBOSE):
            return
        self._logger.debug(event, **self._make_event(verbosity="verbose", **kwargs))

    def debug(self, event: str, **kwargs) -> None:
        """Log at DEBUG level (everything)."""
        if not self._should_log(LogLevel.DEBUG):
            return
        self._logger.debug(event, **self._make_event(verbosity="debug", **kwargs))

    def warning(self, event: str, **kwargs) -> None:
        """Log a warning (always logged unless SILENT)."""
        if _config["level"] == LogLevel.SILENT:
            return
        self._logger.warning(event, **self._make_event(**kwargs))


def get_logger(channel: Union[LogChannel, str] = LogChannel.SYSTEM) -> ChannelLogger:
    """
    Get a channel-specific logger.

    Safe to call at import time: it never touches logging configuration.

    Args:
        channel: The log channel (default: SYSTEM)

    Returns:
        A ChannelLogger instance
    """
    if isinstance(channel, str):
        channel = LogChannel.from_string(channel) or LogChannel.SYSTEM

    return ChannelLogger(channel=channel)


# =============================================================================
# BatchLogger
# =============================================================================

class BatchLogger:
    """
    Logger for a single validate() call.

    Tracks timing and failure counts; records what happened to each
    rule without ever including the rule's value.
    """

    def __init__(self, size: int):
        self.size = size
        self.failed = 0
        self.contained = 0
        self._log = get_logger(LogChannel.DISPATCH)
        self._start = time.perf_counter()
        self._log.debug("batch_started", rules=size)

    def unknown_kind(self, index: int, kind: str) -> None:
        self.failed += 1
        self._log.verbose("unknown_kind", index=index, kind=kind)

    def rejected(self, index: int, kind: str, code: str) -> None:
        self.failed += 1
        self._log.debug("rule_rejected", index=index, kind=kind, code=code)

    def type_mismatch(self, index: int, kind: str, expected: str, got: str) -> None:
        self.failed += 1
        self.contained += 1
        self._log.verbose(
            "type_mismatch_contained",
            index=index,
            kind=kind,
            expected=expected,
            got=got,
        )

    def handler_error(self, index: int, kind: str, error: Exception) -> None:
        self.failed += 1
        self.contained += 1
        self._log.warning(
            "handler_error_contained",
            index=index,
            kind=kind,
            error_type=type(error).__name__,
        )

    def complete(self) -> None:
        duration_ms = (time.perf_counter() - self._start) * 1000
        self._log.verbose(
            "batch_completed",
            rules=self.size,
            failed=self.failed,
            contained_errors=self.contained,
            duration_ms=round(duration_ms, 3),
        )


# =============================================================================
# Introspection
# =============================================================================

def get_current_config() -> dict[str, Any]:
    """Get the current logging configuration (for testing/debugging)."""
    return {
        "level": _config["level"].name,
        "format": _config["format"],
        "channels": sorted(ch.value for ch in _config["channels"]),
    }
