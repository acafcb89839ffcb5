"""
Book Response DTOs
"""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field, field_serializer

from dtos.internal import BookOutput, BooksByAuthorOutput
from .author_response import AuthorResponse


class BookResponse(BaseModel):
    """
    Response DTO for a composed book (book fields plus its authors).
    """

    id: str = Field(description="Book ID")
    title: str = Field(description="Book title")
    price: Decimal = Field(description="Price")
    status: str = Field(description="Publication status")
    author_list: List[AuthorResponse] = Field(alias="authorList", description="Authors of the book")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        # JSON number on the wire, Decimal in Python
        return float(price)

    @classmethod
    def from_output(cls, output: BookOutput) -> "BookResponse":
        return cls(
            id=output.book_id,
            title=output.title,
            price=output.price,
            status=output.status,
            author_list=[AuthorResponse.from_output(author) for author in output.authors],
        )


class BookListByAuthorResponse(BaseModel):
    """
    Response DTO for an author together with every book they wrote.
    """

    author: AuthorResponse = Field(description="The requested author")
    book_list: List[BookResponse] = Field(alias="bookList", description="Books of the author")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    @classmethod
    def from_output(cls, output: BooksByAuthorOutput) -> "BookListByAuthorResponse":
        return cls(
            author=AuthorResponse.from_output(output.author),
            book_list=[BookResponse.from_output(book) for book in output.books],
        )
