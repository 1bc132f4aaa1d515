"""
Console rendering for log events.
"""

from __future__ import annotations

from datetime import datetime, timezone

from structlog.typing import EventDict

RESET = "\x1b[0m"

LEVEL_COLORS = {
    "DEBUG": "\x1b[36m",
    "INFO": "\x1b[32m",
    "WARNING": "\x1b[33m",
    "ERROR": "\x1b[31m",
    "CRITICAL": "\x1b[1;31m",
}

COLORS = {
    "timestamp": "\x1b[90m",
    "logger": "\x1b[35m",
    "key": "\x1b[34m",
    "dim": "\x1b[2m",
}


def colorize(text: str, color: str) -> str:
    return f"{COLORS.get(color, '')}{text}{RESET}"


class ConsoleFormatter:
    """Fixed-width, column-aligned console lines."""

    EXCLUDED_KEYS = {"level", "message", "event", "logger", "timestamp", "_name"}
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    LEVEL_WIDTH = 8
    LOGGER_WIDTH = 24
    SEPARATOR = " | "

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if len(text) > width:
            text = "..." + text[-(width - 3) :] if width > 3 else text[-width:]
        return f"{text:>{width}}"

    @classmethod
    def _format_timestamp(cls, raw: str | None) -> str:
        if raw:
            try:
                dt = datetime.fromisoformat(raw.replace("Z", "+00:00"))
                if dt.tzinfo is None:
                    dt = dt.replace(tzinfo=timezone.utc)
                return dt.astimezone().strftime(cls.TIMESTAMP_FORMAT)
            except ValueError:
                pass
        return datetime.now().strftime(cls.TIMESTAMP_FORMAT)

    @classmethod
    def format(cls, event_dict: EventDict, *, use_color: bool = True) -> str:
        """Format an event dict into one aligned line."""
        level = str(event_dict.get("level", "info")).upper()
        message = str(event_dict.get("message", event_dict.get("event", "")))
        logger_name = str(event_dict.get("logger", "root"))

        extras = []
        for key, value in event_dict.items():
            if key in cls.EXCLUDED_KEYS:
                continue
            if use_color:
                extras.append(f"{colorize(key, 'key')}={colorize(str(value), 'dim')}")
            else:
                extras.append(f"{key}={value}")
        if extras:
            message = f"{message} " + " ".join(extras)

        timestamp = cls._format_timestamp(event_dict.get("timestamp"))
        level_text = cls._fit_right(level, cls.LEVEL_WIDTH)
        logger_text = cls._fit_right(logger_name, cls.LOGGER_WIDTH)
        if use_color:
            timestamp = colorize(timestamp, "timestamp")
            level_text = f"{LEVEL_COLORS.get(level, '')}{level_text}{RESET}"
            logger_text = colorize(logger_text, "logger")

        return cls.SEPARATOR.join([timestamp, level_text, logger_text, message])
