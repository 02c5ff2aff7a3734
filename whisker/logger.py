"""Printf-style logging through a replaceable, process-wide writer."""

from __future__ import annotations

import inspect
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, TextIO


class LogLevel(IntEnum):
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3


_LEVEL_NAMES = {
    LogLevel.ERROR: "Error",
    LogLevel.WARN: "Warning",
    LogLevel.INFO: "Info",
    LogLevel.DEBUG: "Debug",
}


@dataclass
class LogContext:
    """Where a message was logged from, and whether to print that."""

    file: str = ""
    function: str = ""
    line: int = 0
    show_context: bool = True


class LogWriter:
    """Writes log messages to a text stream (standard output by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @staticmethod
    def to_str(level: LogLevel) -> str:
        return _LEVEL_NAMES[LogLevel(level)]

    @classmethod
    def active(cls) -> LogWriter:
        """Return the writer every Logger sends its messages to."""
        return _active_writer

    @classmethod
    def set_active(cls, writer: LogWriter | None) -> None:
        """Make ``writer`` the active writer; ``None`` is ignored."""
        global _active_writer
        if writer is not None:
            _active_writer = writer

    def on_message(self, context: LogContext, level: LogLevel, message: str, *args: Any) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        text = message % args if args else message
        if context.show_context:
            stream.write(f"{self.to_str(level)}: {text} | at: {context.file}:{context.line}\n")
        else:
            stream.write(f"{text}\n")
        stream.flush()


_active_writer: LogWriter = LogWriter()


class Logger:
    """Sends messages to the active writer, tagged with the caller's location."""

    def __init__(self, file: str | None = None, function: str | None = None,
                 line: int | None = None) -> None:
        if file is None or function is None or line is None:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            try:
                if caller is not None:
                    file = caller.f_code.co_filename if file is None else file
                    function = caller.f_code.co_name if function is None else function
                    line = caller.f_lineno if line is None else line
            finally:
                del frame, caller
        self._context = LogContext(file or "", function or "", line or 0)

    @property
    def context(self) -> LogContext:
        return self._context

    def is_debug_enabled(self) -> bool:
        return False

    def info(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.WARN, message, args)

    def debug(self, message: str, *args: Any) -> None:
        if not self.is_debug_enabled():
            return
        self._emit(LogLevel.DEBUG, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.ERROR, message, args)

    def hide_context(self) -> Logger:
        """Stop printing the level and source location; returns self."""
        self._context.show_context = False
        return self

    def _emit(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> None:
        LogWriter.active().on_message(self._context, level, str(message), *args)