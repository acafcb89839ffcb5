from sqlalchemy import (
    Column, String, Date, DateTime, Numeric, ForeignKey, CheckConstraint, Index, Table, DDL, event
)
from datetime import datetime
import uuid
from database import Base
from constants import TableNames, TriggerNames, FieldLimits


def generate_uuid():
    return str(uuid.uuid4())


class Author(Base):
    __tablename__ = TableNames.AUTHORS

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(FieldLimits.NAME_MAX_LENGTH), nullable=False)
    birth_date = Column(Date, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("name != ''", name='chk_author_name_not_empty'),
    )


class Book(Base):
    """
    Represents a book.

    Status values:
    - unpublished: may still move to published
    - published: terminal, the guard trigger below rejects a move back
    """
    __tablename__ = TableNames.BOOKS

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(FieldLimits.TITLE_MAX_LENGTH), nullable=False)
    price = Column(Numeric(FieldLimits.PRICE_PRECISION, FieldLimits.PRICE_SCALE), nullable=False)
    status = Column(String, nullable=False, default='unpublished')
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("title != ''", name='chk_book_title_not_empty'),
        CheckConstraint("price >= 0", name='chk_price_nonnegative'),
        CheckConstraint("status IN ('unpublished', 'published')", name='chk_book_status'),
    )


# Link rows are written in batches by BookRepository, so there is no ORM
# relationship() writing through this table.
book_authors = Table(
    TableNames.BOOK_AUTHORS,
    Base.metadata,
    Column('book_id', String(36), ForeignKey('books.id', ondelete='CASCADE'), primary_key=True),
    Column('author_id', String(36), ForeignKey('authors.id', ondelete='RESTRICT'), primary_key=True),
    Index('idx_book_authors_book_id', 'book_id'),
    Index('idx_book_authors_author_id', 'author_id'),
)


event.listen(
    Book.__table__,
    "after_create",
    DDL(f"""
        CREATE TRIGGER IF NOT EXISTS {TriggerNames.BOOK_STATUS_GUARD}
        BEFORE UPDATE OF status ON books
        FOR EACH ROW
        WHEN OLD.status = 'published' AND NEW.status = 'unpublished'
        BEGIN
            SELECT RAISE(ABORT, 'Publication status cannot be changed from published to unpublished.');
        END
    """)
)

event.listen(
    Author.__table__,
    "after_create",
    DDL(f"""
        CREATE TRIGGER IF NOT EXISTS {TriggerNames.AUTHOR_BIRTH_DATE_INSERT}
        BEFORE INSERT ON authors
        FOR EACH ROW
        WHEN NEW.birth_date >= date('now', 'localtime')
        BEGIN
            SELECT RAISE(ABORT, 'Birth date must be in the past.');
        END
    """)
)

event.listen(
    Author.__table__,
    "after_create",
    DDL(f"""
        CREATE TRIGGER IF NOT EXISTS {TriggerNames.AUTHOR_BIRTH_DATE_UPDATE}
        BEFORE UPDATE OF birth_date ON authors
        FOR EACH ROW
        WHEN NEW.birth_date >= date('now', 'localtime')
        BEGIN
            SELECT RAISE(ABORT, 'Birth date must be in the past.');
        END
    """)
)
