"""Logging setup and the injectable logger capability.

Components never log through module globals. They receive an AppLogger in
their constructor, so tests can pass a NullLogger or a Mock.

Usage:
    from repokit.utils.logger import StdLogger, get_logger

    repo = InMemoryRepository(StdLogger(get_logger(__name__)))
"""

import logging
import sys
from typing import Optional, Protocol, runtime_checkable

from repokit import config

_initialized = False


def configure_logging(level: Optional[str] = None, stream=None) -> None:
    """Attach a single stream handler to the root logger.

    Safe to call more than once; only the first call installs the handler.

    Args:
        level: Level name, defaults to config.LOG_LEVEL
        stream: Output stream, defaults to stdout
    """
    global _initialized
    if _initialized:
        return

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT, config.LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel((level or config.LOG_LEVEL).upper())
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Get a named logger, configuring the root logger on first use."""
    configure_logging()
    return logging.getLogger(name)


@runtime_checkable
class AppLogger(Protocol):
    """Logger capability injected into repositories and services."""

    def info(self, msg: str) -> None:
        ...

    def warn(self, msg: str) -> None:
        ...

    def error(self, msg: str, exc: Optional[BaseException] = None) -> None:
        ...


class StdLogger:
    """AppLogger backed by a standard library logger."""

    def __init__(self, logger: logging.Logger):
        if logger is None:
            raise ValueError("Logger cannot be None")
        self._logger = logger

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warn(self, msg: str) -> None:
        self._logger.warning(msg)

    def error(self, msg: str, exc: Optional[BaseException] = None) -> None:
        if exc is None:
            self._logger.error(msg)
        else:
            self._logger.error("%s: %s", msg, exc, exc_info=exc)


class NullLogger:
    """AppLogger that discards every message."""

    def info(self, msg: str) -> None:
        pass

    def warn(self, msg: str) -> None:
        pass

    def error(self, msg: str, exc: Optional[BaseException] = None) -> None:
        pass
