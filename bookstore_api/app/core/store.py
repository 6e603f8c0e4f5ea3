"""
Persistence store capability.

Repositories never talk to a database directly; they go through a
``Store``.  A store holds one collection per entity kind, keyed by an
integer id, and exchanges plain ``dict`` rows with its callers.  Two
implementations ship with the application: ``SQLiteStore`` in
``core.db`` and ``InMemoryStore`` in ``core.memory_store``.

Filtering is described with a ``Predicate`` so that each backend can
execute it natively (a ``WHERE`` clause for SQLite, a Python test for
the in-memory store) while producing identical results.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


BOOKS = "books"
CATEGORIES = "categories"

# Columns known for every kind.  Anything else is rejected before it
# can reach a query.
COLUMNS: Dict[str, Tuple[str, ...]] = {
    CATEGORIES: ("id", "name"),
    BOOKS: ("id", "name", "author", "description", "value", "publish_date", "category_id"),
}


def check_kind(kind: str) -> Tuple[str, ...]:
    """Return the column names of ``kind`` or raise ``ValueError``."""
    try:
        return COLUMNS[kind]
    except KeyError:
        raise ValueError(f"Unknown entity kind: {kind!r}") from None


@dataclass
class Predicate:
    """Row filter understood by every store.

    All conditions are combined with AND:

    * ``equals`` — each column must equal the given value;
    * ``not_equals`` — each column must differ from the given value;
    * ``contains`` — case-insensitive substring that must occur in at
      least one of ``contains_in`` (the text columns are ORed).
    """

    equals: Dict[str, Any] = field(default_factory=dict)
    not_equals: Dict[str, Any] = field(default_factory=dict)
    contains: Optional[str] = None
    contains_in: Tuple[str, ...] = ()

    def columns(self) -> List[str]:
        return [*self.equals, *self.not_equals, *self.contains_in]

    def matches(self, row: Dict[str, Any]) -> bool:
        for column, value in self.equals.items():
            if row.get(column) != value:
                return False
        for column, value in self.not_equals.items():
            if row.get(column) == value:
                return False
        if self.contains is not None:
            needle = self.contains.casefold()
            if not any(needle in str(row.get(c) or "").casefold() for c in self.contains_in):
                return False
        return True


class Store(ABC):
    """Contract shared by the storage backends.

    Every method either returns a definite result or raises; rows are
    always returned in ascending ``id`` order.
    """

    @abstractmethod
    def find_all(self, kind: str) -> List[Dict[str, Any]]:
        """Return every row of ``kind``."""

    @abstractmethod
    def find_by_id(self, kind: str, entity_id: int) -> Optional[Dict[str, Any]]:
        """Return the row with ``entity_id`` or ``None``."""

    @abstractmethod
    def find_by_predicate(self, kind: str, predicate: Predicate) -> List[Dict[str, Any]]:
        """Return the rows matching ``predicate``."""

    @abstractmethod
    def insert(self, kind: str, row: Dict[str, Any]) -> int:
        """Store a new row and return the id assigned to it.

        Any ``id`` present in ``row`` is ignored.
        """

    @abstractmethod
    def replace(self, kind: str, row: Dict[str, Any]) -> bool:
        """Overwrite the row whose id is ``row["id"]``.

        Returns ``False`` when no such row exists; never inserts.
        """

    @abstractmethod
    def delete(self, kind: str, entity_id: int) -> bool:
        """Delete a row and report whether one was removed."""
