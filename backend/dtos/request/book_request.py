"""
Book Request DTOs
"""

from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from dtos.internal import CreateBookInput, UpdateBookInput


class BookRequest(BaseModel):
    """
    Request body for creating or updating a book.

    ``status`` stays a plain string so an unknown value reaches the service
    and is reported with the list of valid values.
    """

    title: str = Field(description="Book title")
    price: Decimal = Field(description="Price, non-negative")
    author_ids: List[UUID] = Field(alias="authorIdList", description="IDs of the book's authors")
    status: str = Field(description="Publication status: 'unpublished' or 'published'")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "X",
                "price": 10.00,
                "authorIdList": ["3fa85f64-5717-4562-b3fc-2c963f66afa6"],
                "status": "unpublished"
            }
        }

    def _author_id_strings(self) -> List[str]:
        return [str(author_id) for author_id in self.author_ids]

    def to_create_input(self) -> CreateBookInput:
        return CreateBookInput(
            title=self.title,
            price=self.price,
            author_ids=self._author_id_strings(),
            status=self.status,
        )

    def to_update_input(self, book_id: str) -> UpdateBookInput:
        return UpdateBookInput(
            book_id=book_id,
            title=self.title,
            price=self.price,
            author_ids=self._author_id_strings(),
            status=self.status,
        )
