"""
Capture of standard library log records.
"""

import logging

from .core import get_logger


class RedirectStdLibHandler(logging.Handler):
    """Forward stdlib logging records into the structlog sink pipeline."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if "structlog" in record.name:
                return
            logger = get_logger(self._simplify_logger_name(record.name))
            logger.log(getattr(logging, record.levelname, logging.INFO), self.format(record))
        except Exception:
            self.handleError(record)

    @staticmethod
    def _simplify_logger_name(name: str) -> str:
        """Keep short names as-is; longer dotted names keep their last two parts."""
        if not name:
            return "stdlib"
        parts = name.split(".")
        if len(parts) <= 2:
            return name
        return ".".join(parts[-2:])
