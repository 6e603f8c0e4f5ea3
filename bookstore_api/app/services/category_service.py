"""
Business logic for categories.
"""

import logging
from typing import List, Optional

from ..core.exceptions import NotFoundError, OperationRejectedError, ValidationFailedError
from ..core.store import Predicate
from ..models import Category
from ..repositories import BookRepository, CategoryRepository


logger = logging.getLogger(__name__)


class CategoryService:
    """Rules for creating, changing and deleting categories.

    A category that is still referenced by a book cannot be removed;
    ``remove`` reports ``False`` in that case and leaves the store
    untouched.
    """

    def __init__(self, category_repository: CategoryRepository, book_repository: BookRepository) -> None:
        self.category_repository = category_repository
        self.book_repository = book_repository

    async def get_all(self) -> List[Category]:
        return await self.category_repository.get_all()

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        return await self.category_repository.get_by_id(category_id)

    async def add(self, category: Category) -> Category:
        """Validate and store a new category.

        Raises ``ValidationFailedError`` for a blank name and
        ``OperationRejectedError`` when the name is already taken.
        """
        self._validate(category)
        if await self.category_repository.search(Predicate(equals={"name": category.name})):
            logger.warning("Rejected category '%s': name already exists", category.name)
            raise OperationRejectedError(f"Category '{category.name}' already exists")
        return await self.category_repository.add(category)

    async def update(self, category: Category) -> Category:
        """Validate and overwrite an existing category.

        Same checks as ``add``; the name may stay the same.  Raises
        ``NotFoundError`` if the category does not exist, before any
        duplicate name is looked at.
        """
        self._validate(category)
        if await self.category_repository.get_by_id(category.id) is None:
            raise NotFoundError(f"Category {category.id} not found")
        duplicates = await self.category_repository.search(
            Predicate(equals={"name": category.name}, not_equals={"id": category.id})
        )
        if duplicates:
            logger.warning("Rejected update of category %s: name '%s' already exists", category.id, category.name)
            raise OperationRejectedError(f"Category '{category.name}' already exists")
        await self.category_repository.update(category)
        return category

    async def remove(self, category: Category) -> bool:
        books = await self.book_repository.get_by_category(category.id)
        if books:
            logger.warning(
                "Refused to delete category %s: referenced by %s book(s)", category.id, len(books)
            )
            return False
        return await self.category_repository.remove(category)

    async def search(self, text: str) -> List[Category]:
        """Categories whose name contains ``text``, ignoring case."""
        if not text or not text.strip():
            return []
        return await self.category_repository.search(Predicate(contains=text, contains_in=("name",)))

    @staticmethod
    def _validate(category: Category) -> None:
        if not category.name or not category.name.strip():
            raise ValidationFailedError("Category name must not be empty")
