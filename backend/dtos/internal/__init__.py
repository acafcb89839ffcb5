"""
Internal DTOs

Inputs and outputs of the service layer. These are not exposed to external
APIs; routers convert request DTOs into service inputs and service outputs
into response DTOs.
"""

from .service_io import (
    AuthorOutput,
    BookOutput,
    BooksByAuthorOutput,
    CreateAuthorInput,
    CreateBookInput,
    UpdateAuthorInput,
    UpdateBookInput,
)

__all__ = [
    "AuthorOutput",
    "BookOutput",
    "BooksByAuthorOutput",
    "CreateAuthorInput",
    "CreateBookInput",
    "UpdateAuthorInput",
    "UpdateBookInput",
]
