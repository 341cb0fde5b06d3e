"""Small leveled logger with pluggable output backends."""

from __future__ import annotations

import sys
import threading
import time
from abc import ABC, abstractmethod
from collections import deque
from enum import IntEnum
from pathlib import Path
from typing import IO, Optional


class LogLevel(IntEnum):
    """Severity, from most to least important."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


class LoggerBackend(ABC):
    """Destination for finished log messages."""

    @abstractmethod
    def log_enabled(self, level: int) -> bool:
        """Whether messages of ``level`` should be produced."""

    @abstractmethod
    def flush_message(self, message: str, level: int) -> None:
        """Write one finished message."""


def _decorate(message: str, level: int, output_level: bool, output_timestamp: bool) -> str:
    prefix = ""
    if output_timestamp:
        prefix += time.strftime("%Y-%m-%d %H:%M:%S ")
    if output_level:
        prefix += f"[{LogLevel(level).name}] "
    return prefix + message + "\n"


class StreamLoggerBackend(LoggerBackend):
    """Writes messages to a text stream, standard output by default."""

    def __init__(
        self,
        max_level: int = LogLevel.DEBUG,
        stream: Optional[IO[str]] = None,
        output_level: bool = True,
        output_timestamp: bool = True,
    ) -> None:
        self.max_level = max_level
        self.stream = stream
        self.output_level = output_level
        self.output_timestamp = output_timestamp
        self._lock = threading.Lock()

    def log_enabled(self, level: int) -> bool:
        return level <= self.max_level

    def flush_message(self, message: str, level: int) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        text = _decorate(message, level, self.output_level, self.output_timestamp)
        with self._lock:
            stream.write(text)
            stream.flush()


class FileLoggerBackend(LoggerBackend):
    """Writes messages to a file that is truncated when first opened."""

    def __init__(
        self,
        filename: str | Path,
        max_level: int = LogLevel.DEBUG,
        duplicate_in_stderr: bool = False,
        output_level: bool = True,
        output_timestamp: bool = True,
    ) -> None:
        self.filename = Path(filename)
        self.max_level = max_level
        self.duplicate_in_stderr = duplicate_in_stderr
        self.output_level = output_level
        self.output_timestamp = output_timestamp
        self._lock = threading.Lock()
        self._file: Optional[IO[bytes]] = None

    def log_enabled(self, level: int) -> bool:
        return level <= self.max_level

    def flush_message(self, message: str, level: int) -> None:
        text = _decorate(message, level, self.output_level, self.output_timestamp)
        with self._lock:
            if self._file is None:
                try:
                    self._file = open(self.filename, "wb")
                except OSError:
                    print(f"Failed to open:{self.filename}", file=sys.stderr)
                    return
            if self.duplicate_in_stderr:
                sys.stderr.write(text)
                sys.stderr.flush()
            try:
                self._file.write(text.encode("utf-8"))
                self._file.flush()
            except OSError:
                print(f"write() to file of '{text}' failed!", file=sys.stderr)

    def close(self) -> None:
        """Close the file; the next message reopens and truncates it."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> "FileLoggerBackend":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


_backend: LoggerBackend = StreamLoggerBackend(LogLevel.DEBUG, output_level=True, output_timestamp=True)


def set_logger_backend(backend: LoggerBackend) -> LoggerBackend:
    """Install ``backend`` for all loggers and return the previous one."""
    global _backend
    previous, _backend = _backend, backend
    return previous


def is_log_level_enabled(level: int) -> bool:
    """Whether the current backend accepts messages of ``level``."""
    return _backend.log_enabled(level)


def format_binary(data: bytes, output_max: Optional[int] = None) -> str:
    """Render bytes as ``[size] xx xx ...``, eliding the middle beyond ``output_max``."""
    size = len(data)
    if output_max is None or size <= output_max:
        shown = " ".join(f"{b:02x}" for b in data)
        return f"[{size}] " + (shown + " " if shown else "")
    half = output_max // 2
    head = "".join(f"{b:02x} " for b in data[:half])
    tail = "".join(f"{b:02x} " for b in data[size - half:]) if half else ""
    return f"[{size}] {head}... {tail}"


class Logger:
    """Collects one message and hands it to the backend on flush.

    Usable as a context manager, which flushes on exit.
    """

    def __init__(self, level: int = LogLevel.DEBUG, context: str = "") -> None:
        self.level = LogLevel(level)
        self._parts: Optional[list[str]] = [] if is_log_level_enabled(self.level) else None
        if self._parts is not None and context:
            self._parts.append("{" + context + "} ")

    def __bool__(self) -> bool:
        return self._parts is not None

    def write(self, *args) -> "Logger":
        """Append the text of each argument; sequences print each item followed by a space."""
        if self._parts is None:
            return self
        for arg in args:
            if isinstance(arg, (list, tuple, deque)):
                self._parts.extend(f"{item} " for item in arg)
            else:
                self._parts.append(str(arg))
        return self

    def write_binary(self, data: bytes, output_max: Optional[int] = None) -> "Logger":
        """Append a hex dump of ``data``."""
        if self._parts is not None:
            self._parts.append(format_binary(data, output_max))
        return self

    def flush(self) -> None:
        """Send the collected message to the backend; the logger then goes inactive."""
        if self._parts is None:
            return
        message = "".join(self._parts)
        self._parts = None
        _backend.flush_message(message, self.level)

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info) -> None:
        self.flush()