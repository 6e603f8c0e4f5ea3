"""
Data access for books.

Books are always returned together with their ``Category`` so callers
can read ``book.category.name`` without a second lookup.  Categories
are resolved from the store by id and attached to the loaded books;
the book rows themselves only carry ``category_id``.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..core.exceptions import NotFoundError
from ..core.store import BOOKS, CATEGORIES, Predicate, Store
from ..models import Book, Category


logger = logging.getLogger(__name__)

TEXT_COLUMNS = ("name", "author", "description")


class BookRepository:
    """Reads and writes ``Book`` rows through a ``Store``."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def _with_categories(self, rows: Iterable[Dict[str, Any]]) -> List[Book]:
        rows = list(rows)
        if not rows:
            return []
        categories: Dict[int, Category] = {}
        for category_id in {row["category_id"] for row in rows}:
            category_row = self.store.find_by_id(CATEGORIES, category_id)
            if category_row is not None:
                categories[category_id] = Category.from_row(category_row)
        return [Book.from_row(row, categories.get(row["category_id"])) for row in rows]

    async def get_all(self) -> List[Book]:
        return self._with_categories(self.store.find_all(BOOKS))

    async def get_by_id(self, book_id: int) -> Optional[Book]:
        row = self.store.find_by_id(BOOKS, book_id)
        if row is None:
            return None
        return self._with_categories([row])[0]

    async def get_by_category(self, category_id: int) -> List[Book]:
        return self._with_categories(
            self.store.find_by_predicate(BOOKS, Predicate(equals={"category_id": category_id}))
        )

    async def search(self, predicate: Predicate) -> List[Book]:
        return self._with_categories(self.store.find_by_predicate(BOOKS, predicate))

    async def search_book_with_category(self, text: str) -> List[Book]:
        """Books whose name, author, description or category name contains ``text``.

        Matching is case-insensitive.  The result is ordered by id and
        holds each book once even if it matches on several fields.
        """
        rows = {
            row["id"]: row
            for row in self.store.find_by_predicate(
                BOOKS, Predicate(contains=text, contains_in=TEXT_COLUMNS)
            )
        }
        matching_categories = self.store.find_by_predicate(
            CATEGORIES, Predicate(contains=text, contains_in=("name",))
        )
        for category in matching_categories:
            for row in self.store.find_by_predicate(
                BOOKS, Predicate(equals={"category_id": category["id"]})
            ):
                rows.setdefault(row["id"], row)
        return self._with_categories(rows[book_id] for book_id in sorted(rows))

    async def add(self, book: Book) -> Book:
        book.id = self.store.insert(BOOKS, book.to_row())
        logger.info("Created book %s", book.id)
        return self._with_categories([book.to_row()])[0]

    async def update(self, book: Book) -> None:
        """Overwrite an existing book.

        Raises ``NotFoundError`` when no book has ``book.id``.
        """
        if book.id is None or not self.store.replace(BOOKS, book.to_row()):
            raise NotFoundError(f"Book {book.id} not found")
        logger.info("Updated book %s", book.id)

    async def remove(self, book: Book) -> bool:
        removed = self.store.delete(BOOKS, book.id)
        if removed:
            logger.info("Deleted book %s", book.id)
        return removed
