"""
Application-wide constants.

This module centralizes magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class TableNames:
    """Database table names"""

    AUTHORS = "authors"
    BOOKS = "books"
    BOOK_AUTHORS = "book_authors"


class TriggerNames:
    """SQLite triggers guarding invariants at the database level"""

    BOOK_STATUS_GUARD = "trg_books_status_no_unpublish"
    AUTHOR_BIRTH_DATE_INSERT = "trg_authors_birth_date_insert"
    AUTHOR_BIRTH_DATE_UPDATE = "trg_authors_birth_date_update"


class FieldLimits:
    """Column size limits shared by the ORM models and domain validation"""

    NAME_MAX_LENGTH = 255
    TITLE_MAX_LENGTH = 255
    PRICE_PRECISION = 10
    PRICE_SCALE = 2


class ServerConfig:
    """Server configuration defaults"""

    HOST = "0.0.0.0"
    PORT = 8080


class HTTPStatus:
    """HTTP status codes"""

    # Success
    OK = 200
    CREATED = 201

    # Client errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server errors
    INTERNAL_SERVER_ERROR = 500
