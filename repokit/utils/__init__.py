"""Logging utilities package."""

from .logger import (
    AppLogger,
    StdLogger,
    NullLogger,
    get_logger,
    configure_logging,
)

__all__ = [
    "AppLogger",
    "StdLogger",
    "NullLogger",
    "get_logger",
    "configure_logging",
]
