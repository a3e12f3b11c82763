"""
Logging for jsonfmt.

All loggers live under the "jsonfmt" namespace. Console output goes to
stderr so formatted JSON on stdout can be piped.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "jsonfmt"

_configured = False


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[Path | str] = None,
    console: bool = True,
) -> None:
    """
    Replace the handlers on the "jsonfmt" logger.

    Args:
        level: Level name; unknown names mean INFO
        format_string: Record format (DEFAULT_FORMAT if None)
        log_file: Also append records to this file
        console: Write records to stderr
    """
    global _configured

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under "jsonfmt" (WARNING until configured)."""
    if not _configured:
        setup_logging(level="WARNING")

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LogContext:
    """
    Log the start, end and duration of a pipeline run.

    Example:
        with LogContext(logger, "Formatting JSON", spec="RFC 8259"):
            pipeline.run(request)
    """

    def __init__(self, logger: logging.Logger, operation: str, **context):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.started = 0.0

    def __enter__(self):
        self.started = time.perf_counter()
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        self.logger.info(f"Starting: {self.operation} ({details})")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = time.perf_counter() - self.started
        if exc_type is None:
            self.logger.info(f"Completed: {self.operation} ({elapsed:.2f}s)")
        else:
            self.logger.error(
                f"Failed: {self.operation} ({elapsed:.2f}s) - {exc_type.__name__}: {exc_val}"
            )
        return False


def log_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """Log an unexpected request failure with its traceback."""
    logger.error(f"{message}: {type(exc).__name__}: {exc}", exc_info=True)
