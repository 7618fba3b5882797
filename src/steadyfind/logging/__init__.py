"""Logging module for steadyfind."""

from .logger import PollLogger, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "PollLogger",
]
