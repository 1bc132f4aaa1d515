"""
Log sinks: stdio (console or JSON lines) and a rotating JSON-lines file.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Literal, TextIO

import orjson
from structlog.typing import EventDict

from .formatters import ConsoleFormatter

LogFormat = Literal["console", "json"]


def render_json(event_dict: EventDict) -> str:
    return orjson.dumps(event_dict, default=str, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


class BaseSink(ABC):
    @abstractmethod
    def emit(self, event_dict: EventDict) -> None: ...

    def close(self) -> None:
        pass


class StdioSink(BaseSink):
    """Writes one line per event to ``stream``; colors only on a TTY."""

    def __init__(self, stream: TextIO, fmt: LogFormat = "console"):
        self._stream = stream
        self._fmt = fmt

    def emit(self, event_dict: EventDict) -> None:
        if self._fmt == "json":
            line = render_json(event_dict)
        else:
            line = ConsoleFormatter.format(event_dict, use_color=self._stream.isatty())
        self._stream.write(line + "\n")
        self._stream.flush()


class FileSink(BaseSink):
    """JSON lines appended to ``path``, rotated to ``path.1`` .. ``path.N`` past ``max_bytes``."""

    def __init__(self, path: str | Path, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        self._file = open(self._path, "a", encoding="utf-8")

    def emit(self, event_dict: EventDict) -> None:
        self._file.write(render_json(event_dict) + "\n")
        self._file.flush()
        if self._path.stat().st_size > self._max_bytes:
            self._rotate()

    def _backup(self, index: int) -> Path:
        return self._path.with_name(f"{self._path.name}.{index}")

    def _rotate(self) -> None:
        self._file.close()
        for i in range(self._backup_count - 1, 0, -1):
            src = self._backup(i)
            if src.exists():
                src.replace(self._backup(i + 1))
        self._path.replace(self._backup(1))
        self._file = open(self._path, "a", encoding="utf-8")

    def close(self) -> None:
        self._file.close()
