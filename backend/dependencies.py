"""
FastAPI providers for the service layer.

Routers depend on the service interfaces; tests swap implementations via
``app.dependency_overrides``.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.interfaces import IAuthorService, IBookService
from services.author_service import AuthorService
from services.book_service import BookService


def get_author_service(db: Session = Depends(get_db)) -> IAuthorService:
    """AuthorService bound to the request's database session."""
    return AuthorService(db)


def get_book_service(db: Session = Depends(get_db)) -> IBookService:
    """BookService bound to the request's database session."""
    return BookService(db)
