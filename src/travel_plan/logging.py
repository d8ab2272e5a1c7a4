"""
Application logging configuration for the travel plan manager.

Provides structured logging with support for:
- Console output with colors (when available), on stderr so prompts stay clean
- File output for persistent logs
- Correlation IDs tying together the records of one menu action
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime
from pathlib import Path
from typing import Optional, Any

from travel_plan.config import get_config
from travel_plan.exceptions import TravelPlanError

ROOT_LOGGER_NAME = "travel_plan"

# Context variable for the current action's correlation ID
correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def set_correlation_id(cid: Optional[str] = None) -> str:
    """Set correlation ID for current context."""
    if cid is None:
        cid = str(uuid.uuid4())[:8]
    correlation_id.set(cid)
    return cid


class CorrelationFilter(logging.Filter):
    """Add correlation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id.get() or "-"
        return True


class ColorFormatter(logging.Formatter):
    """Formatter that adds colors for console output."""

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors:
            # Work on a copy so the file handler never sees escape codes
            record = logging.makeLogRecord(record.__dict__)
            color = self.COLORS.get(record.levelname, "")
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        console: Whether to log to the console (stderr)

    Returns:
        Root logger for the application
    """
    config = get_config()
    level = level or config.log_level

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file else getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    correlation_filter = CorrelationFilter()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.addFilter(correlation_filter)

        console_format = "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s"
        console_handler.setFormatter(ColorFormatter(console_format, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Log everything to file
        file_handler.addFilter(correlation_filter)

        file_format = "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class LogContext:
    """
    Context manager for structured logging with automatic correlation ID.

    Usage:
        with LogContext("add_trip", trips=3):
            # ... code that may log ...
            pass
    """

    def __init__(self, operation: str, **context: Any):
        """
        Initialize log context.

        Args:
            operation: Name of the operation being performed
            **context: Additional context to include in logs
        """
        self.operation = operation
        self.context = context
        self.logger = get_logger("context")
        self.start_time = None
        self.cid = None

    def __enter__(self) -> "LogContext":
        self.cid = set_correlation_id()
        self.start_time = datetime.now()

        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        self.logger.info(f"Starting {self.operation}: {context_str}")

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {duration_ms:.0f}ms")
        elif issubclass(exc_type, (KeyboardInterrupt, EOFError)):
            self.logger.info(f"Cancelled {self.operation} after {duration_ms:.0f}ms")
        elif issubclass(exc_type, TravelPlanError):
            self.logger.warning(
                f"Aborted {self.operation} after {duration_ms:.0f}ms: {exc_val.message}"
            )
        else:
            self.logger.error(
                f"Failed {self.operation} after {duration_ms:.0f}ms: {exc_val!r}",
                exc_info=(exc_type, exc_val, exc_tb)
            )

        # Don't suppress exceptions
        return False


_initialized = False


def initialize_logging() -> logging.Logger:
    """Initialize application logging (idempotent)."""
    global _initialized
    if not _initialized:
        config = get_config()
        logger = setup_logging(
            level=config.log_level,
            log_file=str(config.log_file) if config.log_file else None,
            console=True
        )
        _initialized = True
        return logger
    return get_logger(ROOT_LOGGER_NAME)
