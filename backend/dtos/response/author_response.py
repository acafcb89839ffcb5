"""
Author Response DTOs
"""

from datetime import date

from pydantic import BaseModel, Field

from dtos.internal import AuthorOutput


class AuthorResponse(BaseModel):
    """Response DTO for an author."""

    id: str = Field(description="Author ID")
    name: str = Field(description="Author name")
    birth_date: date = Field(alias="birthDate", description="Birth date")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    @classmethod
    def from_output(cls, output: AuthorOutput) -> "AuthorResponse":
        return cls(id=output.author_id, name=output.name, birth_date=output.birth_date)
