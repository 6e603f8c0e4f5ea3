from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from .category import Category


@dataclass
class Book:
    """A catalogued book.

    ``category`` is a read-side convenience filled in by the repository
    when the book is loaded; writes only ever look at ``category_id``.
    """

    name: str
    author: str
    description: str
    value: float
    publish_date: date
    category_id: int
    id: Optional[int] = None
    category: Optional[Category] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any], category: Optional[Category] = None) -> "Book":
        publish_date = row["publish_date"]
        if isinstance(publish_date, str):
            publish_date = date.fromisoformat(publish_date)
        return cls(
            id=row["id"],
            name=row["name"],
            author=row["author"],
            description=row["description"] or "",
            value=float(row["value"]),
            publish_date=publish_date,
            category_id=row["category_id"],
            category=category,
        )

    def to_row(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "author": self.author,
            "description": self.description,
            "value": self.value,
            "publish_date": self.publish_date.isoformat(),
            "category_id": self.category_id,
        }
