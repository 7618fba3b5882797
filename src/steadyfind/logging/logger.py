"""Structured logging configuration for steadyfind using structlog.

Poll loops emit one event per lifecycle step (start, accept, timeout,
failure) with the locator and timing bound as structured context.
"""

import logging
import sys
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = False,
    console: bool = True,
) -> None:
    """Configure structured logging for steadyfind.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        structured: Use JSON structured output
        console: Enable console output
    """
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )


# Global state for lazy initialization
_logging_initialized = False


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    global _logging_initialized

    if _logging_initialized:
        return

    try:
        settings = get_settings()
        setup_logging(
            level=settings.log_level,
            log_file=settings.log_file,
            structured=settings.structured_logging,
        )
    except (ValueError, OSError):
        # Invalid settings or unwritable log path fall back to console logging
        setup_logging(level="INFO")

    _logging_initialized = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


class PollLogger:
    """Specialized logger for poll loop lifecycle events."""

    def __init__(self, base_logger: structlog.stdlib.BoundLogger | None = None) -> None:
        """Initialize poll logger.

        Args:
            base_logger: Base logger to use
        """
        self.logger = base_logger or get_logger(__name__)

    def log_poll_start(self, protocol: str, locator: Any, **kwargs) -> dict[str, Any]:
        """Log the start of a poll loop.

        Args:
            protocol: Name of the termination protocol
            locator: Locator being polled
            **kwargs: Additional context

        Returns:
            Poll context dict
        """
        context = {"protocol": protocol, "locator": str(locator), **kwargs}
        self.logger.debug("poll_started", **context)
        return context

    def log_poll_end(
        self,
        context: dict[str, Any],
        accepted: bool,
        polls: int,
        elapsed_ms: float,
        result: Any = None,
    ) -> None:
        """Log the end of a poll loop that accepted or ran out of time.

        Args:
            context: Poll context from log_poll_start
            accepted: Whether the evaluation accepted a result
            polls: Number of evaluations performed
            elapsed_ms: Wall-clock time spent waiting
            result: Optional result summary
        """
        log_data = {**context, "polls": polls, "elapsed_ms": round(elapsed_ms, 1)}
        if result is not None:
            log_data["result"] = str(result)

        if accepted:
            self.logger.debug("poll_accepted", **log_data)
        else:
            self.logger.info("poll_timed_out", **log_data)

    def log_poll_failure(self, context: dict[str, Any], error: Exception) -> None:
        """Log a poll loop aborted by an error.

        Args:
            context: Poll context from log_poll_start
            error: Error that ended the loop
        """
        self.logger.warning(
            "poll_failed",
            **context,
            error=str(error),
            error_type=type(error).__name__,
        )
