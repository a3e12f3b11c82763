"""
Utilities module - Logging helpers.
"""

from .logger import (
    setup_logging,
    get_logger,
    LogContext,
    log_exception,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'LogContext',
    'log_exception',
]
