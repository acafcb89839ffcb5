"""
Author Entity
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from constants import FieldLimits
from exceptions import ValidationError


@dataclass(frozen=True)
class Author:
    """
    Immutable author entity.

    ``id`` is None until the author has been persisted.
    """

    name: str
    birth_date: date
    id: Optional[str] = None

    def __post_init__(self):
        """Validate author fields."""
        if not self.name or not self.name.strip():
            raise ValidationError("Author name cannot be blank.", invalid_fields={"name": self.name})
        if len(self.name) > FieldLimits.NAME_MAX_LENGTH:
            raise ValidationError(
                f"Author name must be at most {FieldLimits.NAME_MAX_LENGTH} characters.",
                invalid_fields={"name": self.name}
            )
        if self.birth_date >= date.today():
            raise ValidationError(
                "Birth date must be in the past.",
                invalid_fields={"birth_date": self.birth_date.isoformat()}
            )
