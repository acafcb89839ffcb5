"""
PublicationStatus Value Object

Immutable representation of a book's publication state.
"""

from enum import Enum
from typing import List

from exceptions import ValidationError


class PublicationStatus(str, Enum):
    """
    Publication state of a book.

    A book may move from unpublished to published, never back.
    """

    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"

    def is_terminal(self) -> bool:
        """Check if this state is terminal (no further transitions)."""
        return self is PublicationStatus.PUBLISHED

    def can_transition_to(self, new_status: "PublicationStatus") -> bool:
        """
        Check if transition to new status is valid.

        Staying in the same status is always allowed.

        Args:
            new_status: Target status

        Returns:
            True if transition is allowed
        """
        if self.is_terminal():
            return new_status is self
        return True

    @classmethod
    def values(cls) -> List[str]:
        return [status.value for status in cls]

    @classmethod
    def from_string(cls, value: str) -> "PublicationStatus":
        """
        Create PublicationStatus from string value (case-insensitive).

        Args:
            value: String representation

        Returns:
            PublicationStatus instance

        Raises:
            ValidationError: If value is not a valid status
        """
        try:
            return cls(value.lower())
        except (ValueError, AttributeError):
            raise ValidationError(
                f"Invalid status value: '{value}'. Must be one of {cls.values()}",
                invalid_fields={"status": value}
            )
