"""
Author repository for author-specific data access operations.
"""

from typing import List, Optional, Sequence
from sqlalchemy.orm import Session
from sqlalchemy import func

from domain.entities import Author
from exceptions import DatabaseError
from models import Author as AuthorModel
from .base_repository import BaseRepository


def to_author(model: AuthorModel) -> Author:
    """Convert an ORM row into a validated Author entity."""
    return Author(id=model.id, name=model.name, birth_date=model.birth_date)


class AuthorRepository(BaseRepository[AuthorModel]):
    """Repository for Author model operations."""

    def __init__(self, db: Session):
        super().__init__(db, AuthorModel)

    def save(self, author: Author) -> Author:
        """
        Persist a new author.

        Args:
            author: Author without an id

        Returns:
            Stored author with its generated id
        """
        model = self.create(AuthorModel(name=author.name, birth_date=author.birth_date))
        return to_author(model)

    def update_author(self, author: Author) -> Author:
        """
        Replace the name and birth date of an existing author.

        Args:
            author: Author carrying the id of the row to update

        Returns:
            Updated author

        Raises:
            DatabaseError: If the row cannot be found for update
        """
        if author.id is None:
            raise ValueError("Author ID must not be None for update.")

        model = self.get_by_id(author.id)
        if model is None:
            raise DatabaseError(
                "update_author",
                f"Failed to update author or retrieve the updated record for ID: {author.id}"
            )

        model.name = author.name
        model.birth_date = author.birth_date
        return to_author(self.update(model))

    def find_by_id(self, author_id: str) -> Optional[Author]:
        """
        Get one author by id.

        Returns:
            Author or None if not found
        """
        model = self.get_by_id(author_id)
        return to_author(model) if model else None

    def count_by_id_list(self, author_ids: Sequence[str]) -> int:
        """
        Count stored authors whose id is in the given list.

        Used by the existence-count check when books are written; each
        stored author counts once however often its id is repeated.

        Args:
            author_ids: Author ids to look up

        Returns:
            Number of matching authors
        """
        if not author_ids:
            return 0
        return self.db.query(func.count(self.model.id)).filter(
            self.model.id.in_(list(author_ids))
        ).scalar() or 0

    def find_by_id_list(self, author_ids: Sequence[str]) -> List[Author]:
        """
        Batch-fetch authors by id, ordered by name.

        Args:
            author_ids: Author ids to fetch

        Returns:
            List of found authors (unknown ids are skipped)
        """
        if not author_ids:
            return []
        models = self.db.query(self.model).filter(
            self.model.id.in_(list(author_ids))
        ).order_by(self.model.name, self.model.id).all()
        return [to_author(model) for model in models]
