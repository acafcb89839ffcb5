"""
Book Entity
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from constants import FieldLimits
from domain.value_objects.publication_status import PublicationStatus
from exceptions import ValidationError


@dataclass(frozen=True)
class Book:
    """
    Immutable book entity.

    ``author_ids`` keeps the ids as given; duplicates are not removed here.
    ``id`` is None until the book has been persisted.
    """

    title: str
    price: Decimal
    author_ids: Tuple[str, ...]
    status: PublicationStatus
    id: Optional[str] = None

    def __post_init__(self):
        """Validate book fields."""
        # Accept any iterable of ids but store a tuple so the entity stays hashable
        object.__setattr__(self, "author_ids", tuple(self.author_ids))

        if not self.title or not self.title.strip():
            raise ValidationError("Title cannot be blank.", invalid_fields={"title": self.title})
        if len(self.title) > FieldLimits.TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title must be at most {FieldLimits.TITLE_MAX_LENGTH} characters.",
                invalid_fields={"title": self.title}
            )
        if self.price < 0:
            raise ValidationError("Price must be non-negative.", invalid_fields={"price": str(self.price)})
        if not self.author_ids:
            raise ValidationError("A book must have at least one author.", invalid_fields={"author_ids": []})
