from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from config.app_config import DATABASE_URL


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def create_db_engine(url: str) -> Engine:
    """
    Build an engine for the given URL with the SQLite pragmas applied.

    In-memory databases share one connection so every session sees the
    same schema and data.
    """
    if _is_memory_url(url):
        engine = create_engine(
            url,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
            echo=False,
        )
    else:
        engine = create_engine(
            url,
            connect_args={'check_same_thread': False},
            echo=False,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,  # Verify connections are alive before using
            pool_recycle=3600  # Recycle connections after 1 hour to prevent stale connections
        )

    # Enable WAL mode and foreign keys on every new connection
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.execute("PRAGMA foreign_keys=ON")  # RESTRICT/CASCADE on book_authors depend on this
        cursor.close()

    return engine


engine = create_db_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Run a block of writes as one unit: commit on success, rollback on any error.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


@contextmanager
def read_only(db: Session) -> Iterator[Session]:
    """
    Run a block of reads; the transaction is always rolled back.
    """
    try:
        yield db
    finally:
        db.rollback()
