"""
Response DTOs

DTOs for outgoing API responses. These control exactly which fields are
exposed and how they are named on the wire.
"""

from .author_response import AuthorResponse
from .book_response import BookResponse, BookListByAuthorResponse
from .health_response import HealthResponse

__all__ = ["AuthorResponse", "BookResponse", "BookListByAuthorResponse", "HealthResponse"]
