"""Level-filtered logging to standard error and an optional log file."""

from __future__ import annotations

import enum
import sys
from typing import IO, Any, Optional, TextIO

LOG_FILE = "vBBS.log"


class LogLevel(enum.IntEnum):
    """Severity of a log message, lowest first."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    @property
    def label(self) -> str:
        """The text shown in brackets before a message."""
        return "WARNING" if self is LogLevel.WARN else self.name


class Logger:
    """Writes messages at or above a threshold to a stream and a log file.

    When no stream is given, messages go to whatever ``sys.stderr`` is
    at the time of each call.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        level: LogLevel = LogLevel.DEBUG,
    ) -> None:
        self._stream = stream
        self.level = LogLevel(level)
        self._file: Optional[IO[str]] = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    @property
    def is_file_open(self) -> bool:
        """True while a log file is attached."""
        return self._file is not None

    def open(self, filename: str) -> None:
        """Attach a log file in append mode, replacing any open one.

        A file that cannot be opened is reported as an error message;
        logging then continues to the stream alone.
        """
        if self._file is not None:
            self.info("Closing existing log file.")
            self.close()
        self.info("Opening log file: %s", filename)
        try:
            self._file = open(filename, "a", encoding="utf-8")
        except OSError:
            self._file = None
            self.error("Error opening log file: %s", filename)

    def close(self) -> None:
        """Detach and close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def set_level(self, level: LogLevel) -> None:
        """Change the threshold below which messages are dropped."""
        self.level = LogLevel(level)
        self.info("Log level set to: %s", self.level.label)

    def _emit(self, stream: IO[str], level: LogLevel, text: str) -> None:
        if level < self.level:
            return
        stream.write(f"[{level.label}] {text}\n")
        stream.flush()

    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        """Log a printf-style message at the given level."""
        level = LogLevel(level)
        text = message % args if args else message
        self._emit(self.stream, level, text)
        if self._file is not None:
            self._emit(self._file, level, text)

    def debug(self, message: str, *args: Any) -> None:
        """Log a debug message."""
        self.log(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Log an informational message."""
        self.log(LogLevel.INFO, message, *args)

    def warn(self, message: str, *args: Any) -> None:
        """Log a warning."""
        self.log(LogLevel.WARN, message, *args)

    def error(self, message: str, *args: Any) -> None:
        """Log an error."""
        self.log(LogLevel.ERROR, message, *args)


_default = Logger()


def init_log(filename: str) -> None:
    """Attach a log file to the shared logger."""
    _default.open(filename)


def close_log() -> None:
    """Close the shared logger's log file."""
    _default.close()


def set_log_level(level: LogLevel) -> None:
    """Set the shared logger's threshold."""
    _default.set_level(level)


def log_message(level: LogLevel, message: str, *args: Any) -> None:
    """Log through the shared logger at the given level."""
    _default.log(level, message, *args)


def debug(message: str, *args: Any) -> None:
    """Log a debug message through the shared logger."""
    _default.debug(message, *args)


def info(message: str, *args: Any) -> None:
    """Log an informational message through the shared logger."""
    _default.info(message, *args)


def warn(message: str, *args: Any) -> None:
    """Log a warning through the shared logger."""
    _default.warn(message, *args)


def error(message: str, *args: Any) -> None:
    """Log an error through the shared logger."""
    _default.error(message, *args)