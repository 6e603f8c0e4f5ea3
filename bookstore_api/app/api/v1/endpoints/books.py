"""
Book endpoints for API v1.

Handlers follow the same pattern as the category routes: one service
call per request, results mapped to ``BookResult``, expected service
failures translated to 400/404.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from bookstore_api.app import mappers
from bookstore_api.app.api.deps import get_book_service
from bookstore_api.app.core.exceptions import (
    NotFoundError,
    OperationRejectedError,
    ValidationFailedError,
)
from bookstore_api.app.schemas.book import BookAdd, BookEdit, BookResult
from bookstore_api.app.services import BookService

router = APIRouter()


@router.get("", response_model=List[BookResult])
async def get_all(service: BookService = Depends(get_book_service)) -> List[BookResult]:
    return mappers.books_to_result(await service.get_all())


@router.get("/{book_id}", response_model=BookResult)
async def get_by_id(book_id: int, service: BookService = Depends(get_book_service)) -> BookResult:
    book = await service.get_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return mappers.book_to_result(book)


@router.get("/category/{category_id}", response_model=List[BookResult])
async def get_by_category(
    category_id: int,
    service: BookService = Depends(get_book_service),
) -> List[BookResult]:
    """Books of one category; 404 when the category has none."""
    books = await service.get_by_category(category_id)
    if not books:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No book was found for this category")
    return mappers.books_to_result(books)


@router.post("", response_model=BookResult)
async def add(book_in: BookAdd, service: BookService = Depends(get_book_service)) -> BookResult:
    """Create a book.

    Fails with 400 when the category does not exist or the name is
    already used by another book; nothing is stored in that case.
    """
    try:
        book = await service.add(mappers.book_from_add(book_in))
    except (ValidationFailedError, OperationRejectedError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return mappers.book_to_result(book)


@router.put("/{book_id}", response_model=BookEdit)
async def update(
    book_id: int,
    book_in: BookEdit,
    service: BookService = Depends(get_book_service),
) -> BookEdit:
    if book_id != book_in.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Id mismatch")
    try:
        await service.update(mappers.book_from_edit(book_in))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except (ValidationFailedError, OperationRejectedError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return book_in


@router.delete("/{book_id}")
async def remove(book_id: int, service: BookService = Depends(get_book_service)) -> Response:
    book = await service.get_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    if not await service.remove(book):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Book could not be removed")
    return Response(status_code=status.HTTP_200_OK)


@router.get("/search/{book_name}", response_model=List[BookResult])
async def search(book_name: str, service: BookService = Depends(get_book_service)) -> List[BookResult]:
    books = await service.search(book_name)
    if not books:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No book was found")
    return mappers.books_to_result(books)


@router.get("/search-book-with-category/{searched_value}", response_model=List[BookResult])
async def search_book_with_category(
    searched_value: str,
    service: BookService = Depends(get_book_service),
) -> List[BookResult]:
    """Search name, author, description and category name at once."""
    books = await service.search_book_with_category(searched_value)
    if not books:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No book was found")
    return mappers.books_to_result(books)
