"""
Structured logging for tokensword.

Sinks:
- stdio: standard output (console/json format)
- file: local rotating JSON file

Library: structlog + orjson for JSON serialization.
"""

from .core import configure_from_settings, configure_logging, get_logger

__all__ = ["configure_from_settings", "configure_logging", "get_logger"]
