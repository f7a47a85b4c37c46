"""A minimal levelled logger writing to a stream and optionally a file."""

from __future__ import annotations

import inspect
import sys
from enum import IntEnum
from pathlib import Path
from types import TracebackType
from typing import IO, Any

__all__ = ["LogLevel", "Logger"]


class LogLevel(IntEnum):
    """Severity levels; NONE silences everything."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    NONE = 4


class Logger:
    """Writes ``file:line message`` lines at or above a threshold level."""

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        filepath: str | Path | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self.level = LogLevel(level)
        self._stream = stream
        self._file: IO[str] | None = open(filepath, "a", encoding="utf-8") if filepath else None

    def close(self) -> None:
        """Close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _emit(self, level: LogLevel, depth: int, fmt: str, args: tuple[Any, ...]) -> None:
        if level < self.level:
            return
        frame = inspect.currentframe()
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is not None:
            where = f"{frame.f_code.co_filename}:{frame.f_lineno}"
        else:
            where = "?:0"
        del frame
        message = fmt % args if args else fmt
        line = f"{where} {message}\n"
        stream = self._stream if self._stream is not None else sys.stderr
        for target in (stream, self._file):
            if target is not None:
                target.write(line)
                target.flush()

    def write(self, level: LogLevel, fmt: str, *args: Any) -> None:
        """Log a printf-style message at ``level``."""
        self._emit(LogLevel(level), 2, fmt, args)

    def debug(self, fmt: str, *args: Any) -> None:
        """Log at DEBUG level."""
        self._emit(LogLevel.DEBUG, 2, fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        """Log at INFO level."""
        self._emit(LogLevel.INFO, 2, fmt, args)

    def warn(self, fmt: str, *args: Any) -> None:
        """Log at WARN level."""
        self._emit(LogLevel.WARN, 2, fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        """Log at ERROR level."""
        self._emit(LogLevel.ERROR, 2, fmt, args)