"""
Application exceptions.

Services and domain entities raise these; the API layer maps them to HTTP
status codes (see utils.error_handlers).
"""


class ApplicationError(Exception):
    """Base class; carries a client-facing message and structured details"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when input or a state transition fails validation"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when a referenced record does not exist"""

    def __init__(self, message: str, resource: str, resource_ids: list[str] | None = None):
        details = {"resource": resource}
        if resource_ids:
            details["resource_ids"] = resource_ids
        super().__init__(message, details)


class AuthorNotFoundError(NotFoundError):
    """Raised when one or more authors cannot be found"""

    def __init__(self, message: str, author_ids: list[str] | None = None):
        super().__init__(message, "author", author_ids)


class BookNotFoundError(NotFoundError):
    """Raised when a book cannot be found"""

    def __init__(self, message: str, book_id: str | None = None):
        super().__init__(message, "book", [book_id] if book_id else None)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
