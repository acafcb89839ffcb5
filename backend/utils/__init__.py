"""
Utility functions and decorators.
"""

from .error_handlers import handle_api_errors
from .logging_utils import (
    StructuredLogger,
    clear_logging_context,
    configure_logging,
    log_operation,
    set_logging_context,
)

__all__ = [
    "handle_api_errors",
    "StructuredLogger",
    "clear_logging_context",
    "configure_logging",
    "log_operation",
    "set_logging_context",
]
