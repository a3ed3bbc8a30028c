"""
materialgraph.log - logging facade with exception formatting.

Usage:
    from materialgraph import log

    log.info("Graph constructed")
    log.warn("Unsupported literal type")

    try:
        material.build()
    except Exception as e:
        log.error(e, "Material build failed")  # includes traceback

Messages go to the standard ``logging`` logger named ``materialgraph``.
"""

import logging
import traceback
from enum import IntEnum
from typing import Callable, Optional

_logger = logging.getLogger("materialgraph")


class Level(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def debug(msg_or_exc, context: str = ""):
    """Log debug message or exception with context."""
    _emit(Level.DEBUG, msg_or_exc, context)


def info(msg_or_exc, context: str = ""):
    """Log info message or exception with context."""
    _emit(Level.INFO, msg_or_exc, context)


def warn(msg_or_exc, context: str = ""):
    """Log warning message or exception with context."""
    _emit(Level.WARN, msg_or_exc, context)


def warning(msg_or_exc, context: str = ""):
    """Alias for warn()."""
    warn(msg_or_exc, context)


def error(msg_or_exc, context: str = ""):
    """Log error message or exception with context."""
    _emit(Level.ERROR, msg_or_exc, context)


def exception(msg: str = ""):
    """Log error with current exception traceback."""
    _logger.exception(msg)


def _emit(level: Level, msg_or_exc, context: str):
    if isinstance(msg_or_exc, BaseException):
        _logger.log(level, _format_exception(msg_or_exc, context))
    elif context:
        _logger.log(level, f"{context}: {msg_or_exc}")
    else:
        _logger.log(level, str(msg_or_exc))


def _format_exception(exc: BaseException, context: str) -> str:
    """Format exception with traceback."""
    exc_type = type(exc).__name__
    exc_msg = str(exc)
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if context:
        return f"{context}: {exc_type}: {exc_msg}\n{tb}"
    return f"{exc_type}: {exc_msg}\n{tb}"


def set_level(level: Level) -> None:
    _logger.setLevel(int(level))


class _CallbackHandler(logging.Handler):
    def __init__(self, callback: Callable[[Level, str], None]):
        super().__init__()
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        level = Level.ERROR
        for candidate in (Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR):
            if record.levelno <= candidate:
                level = candidate
                break
        self._callback(level, record.getMessage())


_callback_handler: Optional[_CallbackHandler] = None


def set_callback(callback: Optional[Callable[[Level, str], None]]) -> None:
    """Route every log record to callback(level, message). None removes it."""
    global _callback_handler
    if _callback_handler is not None:
        _logger.removeHandler(_callback_handler)
        _callback_handler = None
    if callback is not None:
        _callback_handler = _CallbackHandler(callback)
        _logger.addHandler(_callback_handler)
