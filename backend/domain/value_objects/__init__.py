"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- PublicationStatus: Publication state of a book with its transition rule
"""

from .publication_status import PublicationStatus

__all__ = ["PublicationStatus"]
