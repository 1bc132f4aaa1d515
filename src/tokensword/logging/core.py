"""
Core logging configuration and initialization logic.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .sinks import BaseSink, FileSink, LogFormat, StdioSink

if TYPE_CHECKING:
    from tokensword.config.logging import LoggingSettings

# =============================================================================
# Global State
# =============================================================================

_sinks: list[BaseSink] = []


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Until the host configures structlog, events go through the sink pipeline
    with no sinks attached, so nothing is written anywhere.
    """
    if not structlog.is_configured():
        _configure_structlog("INFO")
    return structlog.get_logger(_name=name or "root")


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["logger"] = event_dict.pop("_name", "root")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def multi_sink_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render log to all configured sinks. Returns empty to suppress default output."""
    for sink in _sinks:
        try:
            sink.emit(event_dict)
        except (OSError, ValueError, TypeError):
            # A broken sink must not break the caller; the others still emit.
            continue
    return ""


# =============================================================================
# Configuration Logic
# =============================================================================


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


class _SilentPrintLoggerFactory:
    """Logger factory whose output goes nowhere; sinks do the writing."""

    def __call__(self, *args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=_NopFile())


def _initialize_sinks(sinks: str, fmt: str, file_path: str) -> None:
    for sink in _sinks:
        sink.close()
    _sinks.clear()

    log_format: LogFormat = "json" if fmt.lower() == "json" else "console"

    for name in (s.strip().lower() for s in sinks.split(",")):
        if name == "stdio":
            _sinks.append(StdioSink(sys.stdout, fmt=log_format))
        elif name == "file":
            _sinks.append(FileSink(file_path))


def _configure_structlog(level: str) -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            add_timestamp,
            add_logger_name,
            rename_event_key,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            multi_sink_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=_SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(
    *,
    level: str = "INFO",
    sinks: str = "stdio",
    fmt: str = "console",
    file_path: str = "logs/tokensword.log",
) -> None:
    """
    Configure the logging pipeline.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        sinks: Comma-separated sink names (stdio, file)
        fmt: Output format for stdio sink (console, json)
        file_path: Path for file sink
    """
    from .interceptors import RedirectStdLibHandler

    _initialize_sinks(sinks, fmt, file_path)
    _configure_structlog(level)

    root_logger = logging.getLogger()
    root_logger.handlers = [h for h in root_logger.handlers if not isinstance(h, RedirectStdLibHandler)]
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(RedirectStdLibHandler())


def configure_from_settings(settings: LoggingSettings) -> None:
    configure_logging(
        level=settings.level.value,
        sinks=settings.sinks,
        fmt=settings.format.value,
        file_path=settings.file_path,
    )
