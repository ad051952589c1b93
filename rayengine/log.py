"""Engine and client loggers with a compact, pattern-driven console format."""

from __future__ import annotations

import logging
import re
import sys
import time

CORE_LOGGER_NAME = "RAYENGINE"
CLIENT_LOGGER_NAME = "APP"
DEFAULT_PATTERN = "[%T] [%^%l%$] %v"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}

_LEVEL_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}
_RESET = "\033[m"

_registered = False


class _PatternFormatter(logging.Formatter):
    """Formats records according to a %-flag pattern.

    Supported flags: %T (HH:MM:SS), %H, %M, %S, %e (milliseconds), %l (level),
    %L (short level), %n (logger name), %v (message), %^ / %$ (colour range)
    and %% (a literal percent sign). Unknown flags are copied through.
    """

    def __init__(self, pattern: str) -> None:
        super().__init__()
        parts = re.split(r"%(.)", pattern, flags=re.DOTALL)
        self._literals = parts[0::2]
        self._flags = parts[1::2]

    def format(self, record: logging.LogRecord) -> str:
        return self.render(record, use_color=False)

    def render(self, record: logging.LogRecord, use_color: bool) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        stamp = time.localtime(record.created)
        level = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        color = _LEVEL_COLORS.get(record.levelno, "")

        pieces = [self._literals[0]]
        for flag, literal in zip(self._flags, self._literals[1:]):
            if flag == "T":
                pieces.append(time.strftime("%H:%M:%S", stamp))
            elif flag in "HMS":
                pieces.append(time.strftime(f"%{flag}", stamp))
            elif flag == "e":
                pieces.append(f"{int(record.msecs):03d}")
            elif flag == "l":
                pieces.append(level)
            elif flag == "L":
                pieces.append(level[:1].upper())
            elif flag == "n":
                pieces.append(record.name)
            elif flag == "v":
                pieces.append(message)
            elif flag == "^":
                if use_color:
                    pieces.append(color)
            elif flag == "$":
                if use_color:
                    pieces.append(_RESET)
            elif flag == "%":
                pieces.append("%")
            else:
                pieces.append(f"%{flag}")
            pieces.append(literal)
        return "".join(pieces)


class _StdoutColorHandler(logging.Handler):
    """Writes to the current standard output, coloured when it is a terminal."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = sys.stdout
            try:
                use_color = stream.isatty()
            except (AttributeError, ValueError):
                use_color = False
            formatter = self.formatter
            if isinstance(formatter, _PatternFormatter):
                text = formatter.render(record, use_color)
            else:
                text = self.format(record)
            stream.write(text + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def init(pattern: str = DEFAULT_PATTERN) -> None:
    """Configure the engine and client loggers.

    A second call without an intervening shutdown() reports the failure on
    standard output and leaves the existing configuration in place.
    """
    global _registered
    if _registered:
        print(f"Log init failed: logger with name '{CORE_LOGGER_NAME}' already exists")
        return

    level = TRACE if __debug__ else logging.WARNING
    formatter = _PatternFormatter(pattern)
    for name in (CORE_LOGGER_NAME, CLIENT_LOGGER_NAME):
        logger = logging.getLogger(name)
        handler = _StdoutColorHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
    _registered = True


def shutdown() -> None:
    """Flush and detach the console handlers and restore default logger state."""
    global _registered
    for name in (CORE_LOGGER_NAME, CLIENT_LOGGER_NAME):
        logger = logging.getLogger(name)
        for handler in [h for h in logger.handlers if isinstance(h, _StdoutColorHandler)]:
            handler.flush()
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
    _registered = False


def core_logger() -> logging.Logger:
    """Return the engine logger."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """Return the application (client) logger."""
    return logging.getLogger(CLIENT_LOGGER_NAME)