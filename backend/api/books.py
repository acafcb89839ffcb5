from fastapi import APIRouter, Depends
from dependencies import get_book_service
from dtos.request import BookRequest
from dtos.response import BookResponse
from services.interfaces import IBookService
from utils.error_handlers import handle_api_errors
from constants import HTTPStatus

router = APIRouter()


@router.post("/books", response_model=BookResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create book")
def create_book(
    request: BookRequest,
    service: IBookService = Depends(get_book_service)
):
    """
    Create a book linked to one or more existing authors.

    Returns:
        BookResponse: The stored book with its resolved authors

    Raises:
        HTTPException: 400 on invalid status or fields, 404 if any author is unknown
    """
    output = service.create_book(request.to_create_input())
    return BookResponse.from_output(output)


@router.put("/books/{book_id}", response_model=BookResponse)
@handle_api_errors("Update book")
def update_book(
    book_id: str,
    request: BookRequest,
    service: IBookService = Depends(get_book_service)
):
    """
    Replace a book's fields and authors.

    A published book cannot be set back to unpublished.

    Raises:
        HTTPException: 404 if the book or an author is unknown,
            400 on invalid status, forbidden status change or invalid fields
    """
    output = service.update_book(request.to_update_input(book_id))
    return BookResponse.from_output(output)
