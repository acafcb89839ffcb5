"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod

from dtos.internal import (
    AuthorOutput,
    BookOutput,
    BooksByAuthorOutput,
    CreateAuthorInput,
    CreateBookInput,
    UpdateAuthorInput,
    UpdateBookInput,
)


class IAuthorService(ABC):
    """
    Abstract interface for author management.
    """

    @abstractmethod
    def create_author(self, service_input: CreateAuthorInput) -> AuthorOutput:
        """
        Create a new author.

        Args:
            service_input: Name and birth date

        Returns:
            Created author with its generated id

        Raises:
            ValidationError: If the name is blank or the birth date is not in the past
        """
        pass

    @abstractmethod
    def update_author(self, service_input: UpdateAuthorInput) -> AuthorOutput:
        """
        Replace name and birth date of an existing author.

        Raises:
            AuthorNotFoundError: If the author does not exist
            ValidationError: If the new values are invalid
        """
        pass

    @abstractmethod
    def find_books_by_author(self, author_id: str) -> BooksByAuthorOutput:
        """
        Get an author with all of their books, each book listing all its co-authors.

        Raises:
            AuthorNotFoundError: If the author does not exist
        """
        pass


class IBookService(ABC):
    """
    Abstract interface for book management.
    """

    @abstractmethod
    def create_book(self, service_input: CreateBookInput) -> BookOutput:
        """
        Create a book linked to one or more existing authors.

        Raises:
            ValidationError: If the status string or the book fields are invalid
            AuthorNotFoundError: If any requested author id is unknown
        """
        pass

    @abstractmethod
    def update_book(self, service_input: UpdateBookInput) -> BookOutput:
        """
        Replace the fields and the author links of an existing book.

        Raises:
            ValidationError: If the status string, the status transition or the fields are invalid
            BookNotFoundError: If the book does not exist
            AuthorNotFoundError: If any requested author id is unknown
        """
        pass
