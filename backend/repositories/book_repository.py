"""
Book repository for book and book-author link data access operations.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from sqlalchemy.orm import Session
from sqlalchemy import select, insert, delete

from domain.entities import Book
from domain.value_objects import PublicationStatus
from exceptions import DatabaseError
from models import Book as BookModel, book_authors
from .base_repository import BaseRepository


def to_book(model: BookModel, author_ids: Sequence[str]) -> Book:
    """Convert an ORM row and its linked author ids into a Book entity."""
    return Book(
        id=model.id,
        title=model.title,
        price=model.price,
        status=PublicationStatus(model.status),
        author_ids=tuple(author_ids),
    )


class BookRepository(BaseRepository[BookModel]):
    """Repository for Book model and book_authors link operations."""

    def __init__(self, db: Session):
        super().__init__(db, BookModel)

    def save(self, book: Book) -> Book:
        """
        Persist a new book header (link rows are written separately).

        Args:
            book: Book without an id

        Returns:
            Stored book carrying the requested author ids
        """
        model = self.create(BookModel(
            title=book.title,
            price=book.price,
            status=book.status.value,
        ))
        return to_book(model, book.author_ids)

    def update_book(self, book: Book) -> Book:
        """
        Replace title, price and status of an existing book.

        Args:
            book: Book carrying the id of the row to update

        Returns:
            Updated book carrying the requested author ids

        Raises:
            DatabaseError: If the row cannot be found for update
        """
        if book.id is None:
            raise ValueError("Book ID must not be None for update.")

        model = self.get_by_id(book.id)
        if model is None:
            raise DatabaseError(
                "update_book",
                f"Failed to update book or retrieve the updated record for ID: {book.id}"
            )

        model.title = book.title
        model.price = book.price
        model.status = book.status.value
        return to_book(self.update(model), book.author_ids)

    def find_by_id(self, book_id: str) -> Optional[Book]:
        """
        Get one book by id together with its linked author ids.

        Returns:
            Book or None if not found
        """
        model = self.get_by_id(book_id)
        if model is None:
            return None

        author_ids = self.db.execute(
            select(book_authors.c.author_id).where(book_authors.c.book_id == book_id)
        ).scalars().all()
        return to_book(model, author_ids)

    def link_author_list(self, book_id: str, author_ids: Sequence[str]) -> None:
        """
        Insert one book_authors row per author id as a single batch.

        Args:
            book_id: Book to link
            author_ids: Authors to link to the book
        """
        if not author_ids:
            return
        self.db.execute(
            insert(book_authors),
            [{"book_id": book_id, "author_id": author_id} for author_id in author_ids]
        )

    def delete_author_list_by_book_id(self, book_id: str) -> int:
        """
        Remove every book_authors row of a book.

        Returns:
            Number of link rows deleted
        """
        result = self.db.execute(
            delete(book_authors).where(book_authors.c.book_id == book_id)
        )
        return result.rowcount

    def find_book_list_by_author_id(self, author_id: str) -> List[Book]:
        """
        Get all books linked to an author, each carrying ALL of its author ids.

        Two queries regardless of the number of books: one for the book rows,
        one for every link row of those books.

        Args:
            author_id: Author whose books are requested

        Returns:
            List of books ordered by creation time
        """
        book_ids_by_author = select(book_authors.c.book_id).where(
            book_authors.c.author_id == author_id
        )

        models = self.db.query(self.model).filter(
            self.model.id.in_(book_ids_by_author)
        ).order_by(self.model.created_at, self.model.id).all()
        if not models:
            return []

        links = self.db.execute(
            select(book_authors.c.book_id, book_authors.c.author_id).where(
                book_authors.c.book_id.in_([model.id for model in models])
            )
        ).all()

        author_ids_by_book: Dict[str, List[str]] = defaultdict(list)
        for book_id, linked_author_id in links:
            author_ids_by_book[book_id].append(linked_author_id)

        return [to_book(model, author_ids_by_book[model.id]) for model in models]
