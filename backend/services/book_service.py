"""
Book Service

Handles business logic for books: parsing the publication status, checking
that every referenced author exists, guarding the published status, and
rewriting the book-author links.
"""

from dataclasses import replace
from typing import List
from sqlalchemy.orm import Session
import logging

from database import transaction
from domain.entities import Book
from domain.value_objects import PublicationStatus
from dtos.internal import BookOutput, CreateBookInput, UpdateBookInput
from exceptions import AuthorNotFoundError, BookNotFoundError, ValidationError
from repositories.author_repository import AuthorRepository
from repositories.book_repository import BookRepository
from services.interfaces import IBookService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class BookService(IBookService):
    """Service for book-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize BookService.

        Args:
            db: Database session
        """
        self.db = db
        self.author_repo = AuthorRepository(db)
        self.book_repo = BookRepository(db)

    def _check_authors_exist(self, author_ids: List[str]) -> None:
        """
        Existence-count check: the number of stored authors matching the ids
        must equal the number of ids requested.

        Raises:
            AuthorNotFoundError: On any mismatch
        """
        found = self.author_repo.count_by_id_list(author_ids)
        if found != len(author_ids):
            logger.warning(f"Author existence check failed: requested {len(author_ids)}, found {found}")
            raise AuthorNotFoundError("One or more specified authors could not be found.", list(author_ids))

    @log_operation("create_book")
    def create_book(self, service_input: CreateBookInput) -> BookOutput:
        """
        Create a book and link it to its authors.

        Duplicate author ids are NOT removed before the existence check, so a
        request repeating an id fails with AuthorNotFoundError.
        """
        status = PublicationStatus.from_string(service_input.status)

        with transaction(self.db):
            book = Book(
                title=service_input.title,
                price=service_input.price,
                author_ids=service_input.author_ids,
                status=status,
            )

            self._check_authors_exist(list(book.author_ids))
            authors = self.author_repo.find_by_id_list(book.author_ids)

            created = self.book_repo.save(book)
            self.book_repo.link_author_list(created.id, created.author_ids)

        logger.info(f"Created book {created.id} with {len(authors)} author(s)")
        return BookOutput.from_book(created, authors)

    @log_operation("update_book")
    def update_book(self, service_input: UpdateBookInput) -> BookOutput:
        """
        Replace a book's fields and author links.

        Author ids are de-duplicated before the existence check; the links are
        deleted and re-inserted as a whole.
        """
        status = PublicationStatus.from_string(service_input.status)

        with transaction(self.db):
            existing = self.book_repo.find_by_id(service_input.book_id)
            if existing is None:
                raise BookNotFoundError("Book not found.", service_input.book_id)

            if not existing.status.can_transition_to(status):
                raise ValidationError(
                    f"Cannot change status from '{existing.status.value}' to '{status.value}'.",
                    invalid_fields={"status": status.value}
                )

            distinct_author_ids = list(dict.fromkeys(service_input.author_ids))
            self._check_authors_exist(distinct_author_ids)

            # replace() runs the entity validation again
            book = replace(
                existing,
                title=service_input.title,
                price=service_input.price,
                author_ids=distinct_author_ids,
                status=status,
            )

            updated = self.book_repo.update_book(book)
            self.book_repo.delete_author_list_by_book_id(updated.id)
            self.book_repo.link_author_list(updated.id, updated.author_ids)

            authors = self.author_repo.find_by_id_list(updated.author_ids)

        return BookOutput.from_book(updated, authors)
