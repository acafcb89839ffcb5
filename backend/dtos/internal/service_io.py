"""
Service Input/Output DTOs

Plain dataclasses passed into and returned from AuthorService and BookService.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List

from domain.entities import Author, Book


@dataclass
class CreateAuthorInput:
    name: str
    birth_date: date


@dataclass
class UpdateAuthorInput:
    author_id: str
    name: str
    birth_date: date


@dataclass
class CreateBookInput:
    """
    Input for creating a book.

    ``status`` is the raw string from the request; the service parses it.
    """

    title: str
    price: Decimal
    author_ids: List[str]
    status: str


@dataclass
class UpdateBookInput:
    book_id: str
    title: str
    price: Decimal
    author_ids: List[str]
    status: str


@dataclass
class AuthorOutput:
    author_id: str
    name: str
    birth_date: date

    @classmethod
    def from_author(cls, author: Author) -> "AuthorOutput":
        """Build output from a persisted author."""
        if author.id is None:
            raise ValueError("Cannot create an output from a non-persisted Author entity.")
        return cls(author_id=author.id, name=author.name, birth_date=author.birth_date)


@dataclass
class BookOutput:
    """
    Composed book: book fields plus the resolved author records.
    """

    book_id: str
    title: str
    price: Decimal
    status: str
    authors: List[AuthorOutput] = field(default_factory=list)

    @classmethod
    def from_book(cls, book: Book, authors: List[Author]) -> "BookOutput":
        """Build output from a persisted book and its resolved authors."""
        if book.id is None:
            raise ValueError("Cannot create an output from a non-persisted Book entity.")
        return cls(
            book_id=book.id,
            title=book.title,
            price=book.price,
            status=book.status.value,
            authors=[AuthorOutput.from_author(author) for author in authors],
        )


@dataclass
class BooksByAuthorOutput:
    author: AuthorOutput
    books: List[BookOutput] = field(default_factory=list)
