import os
import sys
from datetime import date
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the application engine in memory and logs on the console during tests
os.environ.setdefault("BOOK_MANAGER_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("BOOK_MANAGER_LOG_TO_FILE", "false")

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from database import create_db_engine, get_db
from init_db import init_database
from services.author_service import AuthorService
from dtos.internal import CreateAuthorInput


@pytest.fixture
def engine():
    """Fresh in-memory database with tables, constraints and triggers"""
    engine = create_db_engine('sqlite:///:memory:')
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def create_author(db_session):
    """Create an author through the service and return its AuthorOutput"""
    service = AuthorService(db_session)

    def _create(name: str = "Jane Doe", birth_date: date = date(1980, 1, 1)):
        return service.create_author(CreateAuthorInput(name=name, birth_date=birth_date))

    return _create


@pytest.fixture
def client(db_session):
    """API client whose requests use the test session"""
    from main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
