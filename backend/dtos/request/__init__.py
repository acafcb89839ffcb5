"""
Request DTOs

DTOs for incoming API requests. Field names are snake_case in Python and
camelCase on the wire.
"""

from .author_request import AuthorRequest
from .book_request import BookRequest

__all__ = ["AuthorRequest", "BookRequest"]
