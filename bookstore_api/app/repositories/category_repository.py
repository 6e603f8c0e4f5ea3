"""
Data access for categories.
"""

import logging
from typing import List, Optional

from ..core.exceptions import NotFoundError
from ..core.store import CATEGORIES, Predicate, Store
from ..models import Category


logger = logging.getLogger(__name__)


class CategoryRepository:
    """Reads and writes ``Category`` rows through a ``Store``."""

    def __init__(self, store: Store) -> None:
        self.store = store

    async def get_all(self) -> List[Category]:
        return [Category.from_row(row) for row in self.store.find_all(CATEGORIES)]

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        row = self.store.find_by_id(CATEGORIES, category_id)
        return Category.from_row(row) if row else None

    async def search(self, predicate: Predicate) -> List[Category]:
        return [Category.from_row(row) for row in self.store.find_by_predicate(CATEGORIES, predicate)]

    async def add(self, category: Category) -> Category:
        category.id = self.store.insert(CATEGORIES, category.to_row())
        logger.info("Created category %s", category.id)
        return category

    async def update(self, category: Category) -> None:
        """Overwrite an existing category.

        Raises ``NotFoundError`` when no category has ``category.id``.
        """
        if category.id is None or not self.store.replace(CATEGORIES, category.to_row()):
            raise NotFoundError(f"Category {category.id} not found")
        logger.info("Updated category %s", category.id)

    async def remove(self, category: Category) -> bool:
        removed = self.store.delete(CATEGORIES, category.id)
        if removed:
            logger.info("Deleted category %s", category.id)
        return removed
