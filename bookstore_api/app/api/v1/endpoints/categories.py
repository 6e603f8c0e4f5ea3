"""
Category endpoints for API v1.

Each handler calls exactly one service operation (``remove`` first
checks that the category exists) and maps the result through
``mappers``.  Expected service failures become 400/404 responses;
anything else propagates and is reported as a server error.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from bookstore_api.app import mappers
from bookstore_api.app.api.deps import get_category_service
from bookstore_api.app.core.exceptions import (
    NotFoundError,
    OperationRejectedError,
    ValidationFailedError,
)
from bookstore_api.app.schemas.category import CategoryAdd, CategoryEdit, CategoryResult
from bookstore_api.app.services import CategoryService

router = APIRouter()


@router.get("", response_model=List[CategoryResult])
async def get_all(service: CategoryService = Depends(get_category_service)) -> List[CategoryResult]:
    """Return every category; an empty catalog yields an empty list."""
    return mappers.categories_to_result(await service.get_all())


@router.get("/{category_id}", response_model=CategoryResult)
async def get_by_id(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResult:
    category = await service.get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return mappers.category_to_result(category)


@router.post("", response_model=CategoryResult)
async def add(
    category_in: CategoryAdd,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResult:
    """Create a category.  Blank or duplicate names are rejected with 400."""
    try:
        category = await service.add(mappers.category_from_add(category_in))
    except (ValidationFailedError, OperationRejectedError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return mappers.category_to_result(category)


@router.put("/{category_id}", response_model=CategoryEdit)
async def update(
    category_id: int,
    category_in: CategoryEdit,
    service: CategoryService = Depends(get_category_service),
) -> CategoryEdit:
    """Update a category and echo the request body back.

    The id in the path must match the id in the body.
    """
    if category_id != category_in.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Id mismatch")
    try:
        await service.update(mappers.category_from_edit(category_in))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except (ValidationFailedError, OperationRejectedError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return category_in


@router.delete("/{category_id}")
async def remove(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    """Delete a category.

    Returns 404 for an unknown id and 400 when books still reference the
    category.
    """
    category = await service.get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    if not await service.remove(category):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category is referenced by at least one book",
        )
    return Response(status_code=status.HTTP_200_OK)


@router.get("/search/{category}", response_model=List[CategoryResult])
async def search(
    category: str,
    service: CategoryService = Depends(get_category_service),
) -> List[CategoryResult]:
    categories = await service.search(category)
    if not categories:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No category was found")
    return mappers.categories_to_result(categories)
