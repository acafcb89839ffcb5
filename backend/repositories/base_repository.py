"""
Shared persistence helpers for the ORM-backed repositories.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session

ModelT = TypeVar('ModelT')


class BaseRepository(Generic[ModelT]):
    """
    Row-level access to one mapped table through a caller-owned session.

    Repositories never commit; the service decides the transaction
    boundary.
    """

    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model

    def _flush_and_reload(self, row: ModelT) -> ModelT:
        # Reload after the write so generated ids, timestamps and NUMERIC
        # rounding come back as stored, like INSERT/UPDATE ... RETURNING.
        self.db.flush()
        self.db.refresh(row)
        return row

    def create(self, row: ModelT) -> ModelT:
        """Insert a new row and return it as stored."""
        self.db.add(row)
        return self._flush_and_reload(row)

    def get_by_id(self, row_id: str) -> Optional[ModelT]:
        """Primary-key lookup; None when no row matches."""
        return self.db.get(self.model, row_id)

    def update(self, row: ModelT) -> ModelT:
        """Write pending attribute changes of a loaded row and return it as stored."""
        return self._flush_and_reload(row)
