"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and convert rows into domain entities.
"""

from .base_repository import BaseRepository
from .author_repository import AuthorRepository
from .book_repository import BookRepository

__all__ = [
    "BaseRepository",
    "AuthorRepository",
    "BookRepository",
]
