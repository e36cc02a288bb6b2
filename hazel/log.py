"""The engine's core and client loggers."""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional, TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_NAME = "HAZEL"
CLIENT_NAME = "APP"

_RESET = "\033[0m"
_COLOURS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}


class _Formatter(logging.Formatter):
    """``[HH:MM:SS] name: message``, coloured by level on a terminal."""

    def __init__(self, colour: bool) -> None:
        super().__init__("[%(asctime)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
        self.colour = colour

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if self.colour:
            start = _COLOURS.get(record.levelno, "")
            if start:
                return f"{start}{text}{_RESET}"
        return text


class Logger:
    """A named logger taking ``str.format`` style messages: ``("Hello {0}!", 5)``."""

    def __init__(self, name: str, stream: TextIO) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        isatty = getattr(stream, "isatty", None)
        handler.setFormatter(_Formatter(bool(isatty and isatty())))
        self.logger.addHandler(handler)
        self.logger.setLevel(TRACE)

    def _log(self, level: int, message: Any, args: tuple) -> None:
        if not self.logger.isEnabledFor(level):
            return
        text = str(message).format(*args) if args else str(message)
        self.logger.log(level, "%s", text)

    def trace(self, message: Any, *args: Any) -> None:
        self._log(TRACE, message, args)

    def debug(self, message: Any, *args: Any) -> None:
        self._log(logging.DEBUG, message, args)

    def info(self, message: Any, *args: Any) -> None:
        self._log(logging.INFO, message, args)

    def warn(self, message: Any, *args: Any) -> None:
        self._log(logging.WARNING, message, args)

    def error(self, message: Any, *args: Any) -> None:
        self._log(logging.ERROR, message, args)

    def fatal(self, message: Any, *args: Any) -> None:
        self._log(logging.CRITICAL, message, args)


_core: Optional[Logger] = None
_client: Optional[Logger] = None


def init() -> None:
    """Create the core and client loggers, writing to standard output at trace level."""
    global _core, _client
    _core = Logger(CORE_NAME, sys.stdout)
    _client = Logger(CLIENT_NAME, sys.stdout)


def core_logger() -> Logger:
    """The engine's own logger."""
    if _core is None:
        raise RuntimeError("logging has not been initialised; call init() first")
    return _core


def client_logger() -> Logger:
    """The application's logger."""
    if _client is None:
        raise RuntimeError("logging has not been initialised; call init() first")
    return _client