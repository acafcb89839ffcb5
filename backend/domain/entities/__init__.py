"""
Domain Entities

Entities are business objects with identity. They validate their own
fields at construction and are replaced as a whole on update.

Examples:
- Author: Person who writes books
- Book: Title with a price, a publication status and one or more authors
"""

from .author import Author
from .book import Book

__all__ = ["Author", "Book"]
