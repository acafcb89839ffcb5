"""
Author Service

Handles business logic for authors: creation, update, and listing an
author's books with their complete author lists.
"""

from dataclasses import replace
from typing import List
from sqlalchemy.orm import Session
import logging

from database import transaction, read_only
from domain.entities import Author
from dtos.internal import (
    AuthorOutput,
    BookOutput,
    BooksByAuthorOutput,
    CreateAuthorInput,
    UpdateAuthorInput,
)
from exceptions import AuthorNotFoundError
from repositories.author_repository import AuthorRepository
from repositories.book_repository import BookRepository
from services.interfaces import IAuthorService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class AuthorService(IAuthorService):
    """Service for author-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize AuthorService.

        Args:
            db: Database session
        """
        self.db = db
        self.author_repo = AuthorRepository(db)
        self.book_repo = BookRepository(db)

    @log_operation("create_author")
    def create_author(self, service_input: CreateAuthorInput) -> AuthorOutput:
        with transaction(self.db):
            author = Author(name=service_input.name, birth_date=service_input.birth_date)
            created = self.author_repo.save(author)

        logger.info(f"Created author {created.id}")
        return AuthorOutput.from_author(created)

    @log_operation("update_author")
    def update_author(self, service_input: UpdateAuthorInput) -> AuthorOutput:
        with transaction(self.db):
            existing = self.author_repo.find_by_id(service_input.author_id)
            if existing is None:
                raise AuthorNotFoundError("Author not found.", [service_input.author_id])

            # replace() runs the entity validation again
            author = replace(existing, name=service_input.name, birth_date=service_input.birth_date)
            updated = self.author_repo.update_author(author)

        return AuthorOutput.from_author(updated)

    @log_operation("find_books_by_author")
    def find_books_by_author(self, author_id: str) -> BooksByAuthorOutput:
        """
        Get an author and their books.

        All co-authors of the fetched books are loaded with a single batch
        query and attached per book, so the cost does not grow with the
        number of books.
        """
        with read_only(self.db):
            author = self.author_repo.find_by_id(author_id)
            if author is None:
                raise AuthorNotFoundError(f"Author with ID {author_id} not found.", [author_id])

            author_output = AuthorOutput.from_author(author)

            books = self.book_repo.find_book_list_by_author_id(author_id)
            if not books:
                return BooksByAuthorOutput(author=author_output, books=[])

            # Union of author ids across all books, first-seen order
            all_author_ids = list(dict.fromkeys(
                linked_id for book in books for linked_id in book.author_ids
            ))
            # Name-ordered, so every book lists its authors like create/update do
            all_authors: List[Author] = self.author_repo.find_by_id_list(all_author_ids)

            book_outputs = []
            for book in books:
                linked_ids = set(book.author_ids)
                book_outputs.append(BookOutput.from_book(
                    book, [author for author in all_authors if author.id in linked_ids]
                ))

        return BooksByAuthorOutput(author=author_output, books=book_outputs)
