"""
Dependencies for route handlers.

Services are constructed once by ``create_app`` and kept on
``app.state``; these functions fetch them for ``Depends``.  Tests swap
the whole object graph by passing their own store to ``create_app``.
"""

from fastapi import Request

from ..services import BookService, CategoryService


def get_book_service(request: Request) -> BookService:
    return request.app.state.book_service


def get_category_service(request: Request) -> CategoryService:
    return request.app.state.category_service
