"""Log records, log handlers and the log manager."""

from __future__ import annotations

import enum
import sys
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from cowdia.singleton import Singleton


class LogLevel(enum.Enum):
    """Severity of a log record; the value is its printed label."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Log:
    """A single log record stamped with the time it was made."""

    level: LogLevel
    message: str
    timestamp: float = field(default_factory=time.time)

    def to_string(self) -> str:
        """Return ``[Y-M-D H:M:S] (LEVEL) message`` in local time."""
        t = time.localtime(self.timestamp)
        return (
            f"[{t.tm_year}-{t.tm_mon}-{t.tm_mday} "
            f"{t.tm_hour}:{t.tm_min}:{t.tm_sec}] "
            f"({self.level.value}) {self.message}"
        )


class LogHandler(ABC):
    """Receives every record the log manager produces."""

    @abstractmethod
    def handle(self, log: Log) -> None:
        """Process one record."""


class StreamLogHandler(LogHandler):
    """Writes records to a text stream, or to the stream a callable returns."""

    def __init__(self, stream: TextIO | Callable[[], TextIO]) -> None:
        self._stream = stream

    def handle(self, log: Log) -> None:
        stream = self._stream() if callable(self._stream) else self._stream
        stream.write(log.to_string() + "\n")
        stream.flush()


class FileLogHandler(LogHandler):
    """Appends records to a file."""

    def __init__(self, path) -> None:
        self._file = open(path, "a", encoding="utf-8")

    def handle(self, log: Log) -> None:
        self._file.write(log.to_string() + "\n")
        self._file.flush()

    def close(self) -> None:
        """Close the file."""
        self._file.close()

    def __enter__(self) -> FileLogHandler:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class LogManager(Singleton):
    """Dispatches log records to its handlers."""

    def __init__(self) -> None:
        super().__init__()
        self._handlers: list[LogHandler] = []
        self._lock = threading.Lock()

    def add_standard_output(self) -> LogHandler:
        """Write records to standard output."""
        return self.add_handler(StreamLogHandler(lambda: sys.stdout))

    def add_standard_error(self) -> LogHandler:
        """Write records to standard error."""
        return self.add_handler(StreamLogHandler(lambda: sys.stderr))

    def add_file_output(self, filename) -> LogHandler:
        """Append records to ``filename``."""
        return self.add_handler(FileLogHandler(filename))

    def add_handler(self, handler: LogHandler) -> LogHandler:
        """Add ``handler`` and return it."""
        self._handlers.append(handler)
        return handler

    def log(self, level: LogLevel, message: str) -> None:
        """Send a record to every handler."""
        with self._lock:
            record = Log(level, message)
            for handler in self._handlers:
                handler.handle(record)

    def log_exception(self, error: BaseException) -> None:
        """Log an error at ``ERROR`` level."""
        what = getattr(error, "what", None)
        text = what() if callable(what) else f"[{type(error).__name__}] {error}"
        self.log(LogLevel.ERROR, text)

    def release(self) -> None:
        """Close file outputs and stop being the live log manager."""
        for handler in self._handlers:
            if isinstance(handler, FileLogHandler):
                handler.close()
        super().release()


def log(level: LogLevel, message: str) -> None:
    """Log through the live log manager; does nothing when there is none."""
    try:
        manager = LogManager.get()
    except LookupError:
        return
    manager.log(level, message)


def log_exception(error: BaseException) -> None:
    """Log an error through the live log manager; does nothing when there is none."""
    try:
        manager = LogManager.get()
    except LookupError:
        return
    manager.log_exception(error)