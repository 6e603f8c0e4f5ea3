"""
Business logic for books.

Every write checks that the book's ``category_id`` points to an
existing category and that no other book already uses the same name
before anything is handed to the repository, so a rejected request
leaves the store exactly as it was.
"""

import logging
from typing import List, Optional

from ..core.exceptions import NotFoundError, OperationRejectedError, ValidationFailedError
from ..core.store import Predicate
from ..models import Book
from ..repositories import BookRepository, CategoryRepository


logger = logging.getLogger(__name__)


class BookService:
    """Rules for creating, changing, deleting and searching books."""

    def __init__(self, book_repository: BookRepository, category_repository: CategoryRepository) -> None:
        self.book_repository = book_repository
        self.category_repository = category_repository

    async def get_all(self) -> List[Book]:
        return await self.book_repository.get_all()

    async def get_by_id(self, book_id: int) -> Optional[Book]:
        return await self.book_repository.get_by_id(book_id)

    async def get_by_category(self, category_id: int) -> List[Book]:
        return await self.book_repository.get_by_category(category_id)

    async def add(self, book: Book) -> Book:
        """Validate and store a new book.

        Raises ``ValidationFailedError`` for invalid fields or an unknown
        category and ``OperationRejectedError`` for a duplicate name.
        """
        await self._validate(book)
        if await self.book_repository.search(Predicate(equals={"name": book.name})):
            logger.warning("Rejected book '%s': name already exists", book.name)
            raise OperationRejectedError(f"Book '{book.name}' already exists")
        return await self.book_repository.add(book)

    async def update(self, book: Book) -> Book:
        """Validate and overwrite an existing book.

        Same checks as ``add``.  Raises ``NotFoundError`` if the book does
        not exist, before any duplicate name is looked at; no row is
        created in that case.
        """
        await self._validate(book)
        if await self.book_repository.get_by_id(book.id) is None:
            raise NotFoundError(f"Book {book.id} not found")
        duplicates = await self.book_repository.search(
            Predicate(equals={"name": book.name}, not_equals={"id": book.id})
        )
        if duplicates:
            logger.warning("Rejected update of book %s: name '%s' already exists", book.id, book.name)
            raise OperationRejectedError(f"Book '{book.name}' already exists")
        await self.book_repository.update(book)
        return book

    async def remove(self, book: Book) -> bool:
        return await self.book_repository.remove(book)

    async def search(self, book_name: str) -> List[Book]:
        """Books whose name contains ``book_name``, ignoring case."""
        if not book_name or not book_name.strip():
            return []
        return await self.book_repository.search(Predicate(contains=book_name, contains_in=("name",)))

    async def search_book_with_category(self, searched_value: str) -> List[Book]:
        """Books matching ``searched_value`` in their own text fields or category name."""
        if not searched_value or not searched_value.strip():
            return []
        return await self.book_repository.search_book_with_category(searched_value)

    async def _validate(self, book: Book) -> None:
        if not book.name or not book.name.strip():
            raise ValidationFailedError("Book name must not be empty")
        if not book.author or not book.author.strip():
            raise ValidationFailedError("Book author must not be empty")
        if book.value is None or book.value < 0:
            raise ValidationFailedError("Book value must not be negative")
        if await self.category_repository.get_by_id(book.category_id) is None:
            logger.warning("Rejected book '%s': category %s does not exist", book.name, book.category_id)
            raise ValidationFailedError(f"Category {book.category_id} does not exist")
