# envkit/logger.py
"""
Console logging for the envkit command line.

The accessors in envkit.runtime_env never log. Loggers handed out here
write to stderr, colored when stderr is a terminal, so stdout stays
free for the values the CLI prints.
"""
from __future__ import annotations

import copy
import logging
import sys
import threading
from typing import Dict

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

_lock = threading.Lock()
_loggers: Dict[str, logging.Logger] = {}
_level: int = logging.WARNING
_colorama_ready = False


class ColorFormatter(logging.Formatter):
    """Prefix the level name with an ANSI color."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record
        colored = copy.copy(record)
        color = self.COLORS.get(colored.levelname)
        if color:
            colored.levelname = f"{color}{colored.levelname}{self.RESET}"
        return super().format(colored)


def _stderr_is_tty() -> bool:
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


def _console_handler(level: int) -> logging.Handler:
    global _colorama_ready

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if _stderr_is_tty():
        if sys.platform == "win32" and not _colorama_ready:
            import colorama

            colorama.just_fix_windows_console()
            _colorama_ready = True
        handler.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str = "envkit") -> logging.Logger:
    """Return a cached logger with a single stderr handler."""
    with _lock:
        logger = _loggers.get(name)
        if logger is not None:
            return logger

        logger = logging.getLogger(name)
        logger.setLevel(_level)
        logger.propagate = False
        for h in logger.handlers[:]:
            logger.removeHandler(h)
        logger.addHandler(_console_handler(_level))

        _loggers[name] = logger
        return logger


def setup_logging(level: int = logging.WARNING) -> None:
    """Set the level for new and already created loggers."""
    global _level

    with _lock:
        _level = level
        for logger in _loggers.values():
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)


def teardown_logging() -> None:
    """Close handlers and forget cached loggers.

    The next get_logger() call builds a fresh handler, picking up the
    current sys.stderr.
    """
    global _level

    with _lock:
        for logger in _loggers.values():
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)
                handler.close()
        _loggers.clear()
        _level = logging.WARNING
