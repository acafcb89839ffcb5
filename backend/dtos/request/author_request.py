"""
Author Request DTOs
"""

from datetime import date

from pydantic import BaseModel, Field

from dtos.internal import CreateAuthorInput, UpdateAuthorInput


class AuthorRequest(BaseModel):
    """
    Request body for creating or updating an author.

    Only the shape is checked here; name/birth date rules are enforced by
    the Author entity so they apply to every caller.
    """

    name: str = Field(description="Author name")
    birth_date: date = Field(alias="birthDate", description="Birth date (YYYY-MM-DD)")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "name": "Jane Doe",
                "birthDate": "1980-01-01"
            }
        }

    def to_create_input(self) -> CreateAuthorInput:
        return CreateAuthorInput(name=self.name, birth_date=self.birth_date)

    def to_update_input(self, author_id: str) -> UpdateAuthorInput:
        return UpdateAuthorInput(author_id=author_id, name=self.name, birth_date=self.birth_date)
