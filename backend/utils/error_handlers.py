"""
API error translation.

Application exceptions raised by the service layer become HTTPException
responses here, so routers only deal with the successful path.
"""

import inspect
from functools import wraps
from typing import Callable
from fastapi import HTTPException
import logging

from constants import HTTPStatus
from exceptions import (
    ValidationError,
    NotFoundError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Map an exception raised by an endpoint to the HTTPException to send.

    4xx errors carry the application message; anything else gets a generic
    message and the details only go to the log.
    """
    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail=error.message
        )
    if isinstance(error, NotFoundError):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.NOT_FOUND,
            detail=error.message
        )
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
    else:
        logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Translate exceptions escaping an endpoint into HTTP responses.

    ValidationError maps to 400 and NotFoundError to 404, both with the
    application message. Any other exception maps to 500 with a generic
    message naming the operation. HTTPExceptions pass through unchanged.

    Example:
        @router.post("/books", status_code=HTTPStatus.CREATED)
        @handle_api_errors("Create book")
        def create_book(...):
            ...
    """
    def decorator(func: Callable):
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except HTTPException:
                    raise
                except Exception as e:
                    raise _to_http_exception(operation_name, e) from e

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        return sync_wrapper

    return decorator
