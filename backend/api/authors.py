from fastapi import APIRouter, Depends
from dependencies import get_author_service
from dtos.request import AuthorRequest
from dtos.response import AuthorResponse, BookListByAuthorResponse
from services.interfaces import IAuthorService
from utils.error_handlers import handle_api_errors
from constants import HTTPStatus

router = APIRouter()


@router.post("/authors", response_model=AuthorResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create author")
def create_author(
    request: AuthorRequest,
    service: IAuthorService = Depends(get_author_service)
):
    """
    Create a new author.

    Returns:
        AuthorResponse: The stored author with its generated id

    Raises:
        HTTPException: 400 if the name is blank or the birth date is not in the past
    """
    output = service.create_author(request.to_create_input())
    return AuthorResponse.from_output(output)


@router.put("/authors/{author_id}", response_model=AuthorResponse)
@handle_api_errors("Update author")
def update_author(
    author_id: str,
    request: AuthorRequest,
    service: IAuthorService = Depends(get_author_service)
):
    """
    Replace the name and birth date of an existing author.

    Raises:
        HTTPException: 404 if the author does not exist, 400 on invalid values
    """
    output = service.update_author(request.to_update_input(author_id))
    return AuthorResponse.from_output(output)


@router.get("/authors/{author_id}/books", response_model=BookListByAuthorResponse)
@handle_api_errors("Get books by author")
def get_books_by_author(
    author_id: str,
    service: IAuthorService = Depends(get_author_service)
):
    """
    Get an author and every book they wrote.

    Each book lists all of its authors, not only the requested one.

    Raises:
        HTTPException: 404 if the author does not exist
    """
    output = service.find_books_by_author(author_id)
    return BookListByAuthorResponse.from_output(output)
