"""
Top-level router for version 1 of the API.
"""

from fastapi import APIRouter

from .endpoints import books, categories

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
