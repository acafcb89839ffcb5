"""
Structured Logging Utilities

Root logger setup (console plus optional rotating file) and a request-scoped
context that is merged into every record of the service layer.
"""

import inspect
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Identifiers picked up from the call arguments, either directly or as an
# attribute of an argument (service input DTOs)
_CONTEXT_KEYS = ("author_id", "book_id")


# Attributes every LogRecord has; anything else on a record came from ``extra``
_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class ContextFormatter(logging.Formatter):
    """
    Formatter that appends the record's context as ``key=value`` pairs.

    Example output:
        ... - INFO - Starting update_book [operation=update_book book_id=b-1 request_id=...]
    """

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return line

        rendered = " ".join(f"{key}={value}" for key, value in context.items())
        # Keep tracebacks last
        head, sep, tail = line.partition("\n")
        return f"{head} [{rendered}]{sep}{tail}"


def configure_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """
    Configure the root logger with a console handler and, optionally, a
    rotating file handler (10MB per file, keep 5 backups).

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Root log level
        log_file: Path of the log file, or None for console only
    """
    log_formatter = ContextFormatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_book_manager", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    console_handler._book_manager = True
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(level)
        file_handler._book_manager = True
        root_logger.addHandler(file_handler)


class StructuredLogger(logging.LoggerAdapter):
    """
    Logger adapter that merges the request context into every record.

    Keys given through ``extra`` win over the request context, so an
    operation can add ``book_id`` while the middleware supplies
    ``request_id``:

        logger = StructuredLogger(__name__)
        logger.info("Book created", extra={"book_id": book_id})
    """

    def __init__(self, name: str):
        super().__init__(logging.getLogger(name), {})

    def process(self, msg, kwargs):
        context = _logging_context.get().copy()
        context.update(kwargs.get("extra") or {})
        kwargs["extra"] = context
        return msg, kwargs


def set_logging_context(**kwargs):
    """
    Add key-value pairs to the context of the current request.

    Every StructuredLogger record emitted in the same context carries them.

    Example:
        set_logging_context(request_id="abc-123", method="POST", path="/books")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def clear_logging_context():
    _logging_context.set({})


def _extract_context(operation_name: str, func, args: tuple, kwargs: dict) -> Dict[str, Any]:
    context = {"operation": operation_name}
    try:
        arguments = inspect.signature(func).bind_partial(*args, **kwargs).arguments
    except TypeError:
        arguments = dict(kwargs)

    for key in _CONTEXT_KEYS:
        if key in arguments:
            context[key] = arguments[key]
            continue
        for value in arguments.values():
            attr = getattr(value, key, None)
            if isinstance(attr, str):
                context[key] = attr
                break
    return context


def _log_failure(logger: StructuredLogger, operation_name: str, context: Dict[str, Any], error: Exception):
    failed = dict(context, error=str(error), error_type=type(error).__name__)
    logger.error(f"Failed {operation_name}", extra=failed, exc_info=True)


def log_operation(operation_name: str):
    """
    Log the start, completion or failure of a service operation.

    The record context holds the operation name plus any ``author_id`` or
    ``book_id`` found among the arguments, either as a parameter or as an
    attribute of an input DTO. Exceptions are logged and re-raised.

    Example:
        @log_operation("update_book")
        def update_book(self, service_input: UpdateBookInput):
            ...
    """
    def decorator(func):
        logger = StructuredLogger(func.__module__)

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                context = _extract_context(operation_name, func, args, kwargs)
                logger.info(f"Starting {operation_name}", extra=context)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _log_failure(logger, operation_name, context, e)
                    raise
                logger.info(f"Completed {operation_name}", extra=context)
                return result

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            context = _extract_context(operation_name, func, args, kwargs)
            logger.info(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _log_failure(logger, operation_name, context, e)
                raise
            logger.info(f"Completed {operation_name}", extra=context)
            return result

        return sync_wrapper

    return decorator
