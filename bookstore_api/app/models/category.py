from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Category:
    name: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Category":
        return cls(id=row["id"], name=row["name"])

    def to_row(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}
