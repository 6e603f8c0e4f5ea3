"""
In-memory ``Store`` implementation.

Used by the test-suite and available at runtime with
``STORAGE_BACKEND=memory``.  Data lives only as long as the process.
"""

import threading
from typing import Any, Dict, List, Optional

from .store import COLUMNS, Predicate, Store, check_kind


class InMemoryStore(Store):
    """Dictionary-backed store with per-kind id counters.

    Ids are handed out from a counter that only moves forward, so an id
    is never reused even after the row it belonged to is deleted.  Rows
    are copied on the way in and out; callers cannot mutate stored state
    by holding on to a returned ``dict``.
    """

    def __init__(self) -> None:
        self._rows: Dict[str, Dict[int, Dict[str, Any]]] = {kind: {} for kind in COLUMNS}
        self._next_id: Dict[str, int] = {kind: 1 for kind in COLUMNS}
        self._lock = threading.Lock()

    def _clean(self, kind: str, row: Dict[str, Any]) -> Dict[str, Any]:
        return {column: row.get(column) for column in check_kind(kind)}

    def find_all(self, kind: str) -> List[Dict[str, Any]]:
        check_kind(kind)
        with self._lock:
            return [dict(row) for _, row in sorted(self._rows[kind].items())]

    def find_by_id(self, kind: str, entity_id: int) -> Optional[Dict[str, Any]]:
        check_kind(kind)
        with self._lock:
            row = self._rows[kind].get(entity_id)
            return dict(row) if row is not None else None

    def find_by_predicate(self, kind: str, predicate: Predicate) -> List[Dict[str, Any]]:
        columns = check_kind(kind)
        for column in predicate.columns():
            if column not in columns:
                raise ValueError(f"Unknown column {column!r} for {kind}")
        return [row for row in self.find_all(kind) if predicate.matches(row)]

    def insert(self, kind: str, row: Dict[str, Any]) -> int:
        stored = self._clean(kind, row)
        with self._lock:
            entity_id = self._next_id[kind]
            self._next_id[kind] = entity_id + 1
            stored["id"] = entity_id
            self._rows[kind][entity_id] = stored
        return entity_id

    def replace(self, kind: str, row: Dict[str, Any]) -> bool:
        stored = self._clean(kind, row)
        with self._lock:
            if stored["id"] not in self._rows[kind]:
                return False
            self._rows[kind][stored["id"]] = stored
            return True

    def delete(self, kind: str, entity_id: int) -> bool:
        check_kind(kind)
        with self._lock:
            return self._rows[kind].pop(entity_id, None) is not None
