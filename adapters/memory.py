from __future__ import annotations

from collections import defaultdict
from copy import deepcopy
from typing import Any, Dict, List, Optional, Sequence

from adapters.base import DatabaseAdapter


class MemoryAdapter(DatabaseAdapter):
    """In-process store keyed by collection name, for tests and prototyping."""

    engine = "memory"

    def __init__(self, mapper: Any, uri: Optional[str] = None, extension: Optional[Sequence[str]] = None):
        super().__init__(mapper, uri, extension=extension)
        self._collections: Dict[str, Dict[int, Dict[str, Any]]] = defaultdict(dict)
        self._sequences: Dict[str, int] = defaultdict(int)

    def create(self, collection: str, record: Dict[str, Any]) -> Dict[str, Any]:
        self._sequences[collection] += 1
        stored = dict(record)
        stored["id"] = self._sequences[collection]
        self._collections[collection][stored["id"]] = stored
        return deepcopy(stored)

    def update(self, collection: str, record: Dict[str, Any]) -> Dict[str, Any]:
        record_id = record.get("id")
        rows = self._collections[collection]
        if record_id not in rows:
            raise KeyError(f"{collection}: no record with id {record_id!r}")
        rows[record_id].update(record)
        return deepcopy(rows[record_id])

    def delete(self, collection: str, record_id: int) -> None:
        rows = self._collections[collection]
        if record_id not in rows:
            raise KeyError(f"{collection}: no record with id {record_id!r}")
        del rows[record_id]

    def find(self, collection: str, record_id: int) -> Optional[Dict[str, Any]]:
        row = self._collections[collection].get(record_id)
        return deepcopy(row) if row is not None else None

    def all(self, collection: str) -> List[Dict[str, Any]]:
        rows = self._collections[collection]
        return [deepcopy(rows[key]) for key in sorted(rows)]

    def clear(self, collection: Optional[str] = None) -> None:
        if collection is None:
            self._collections.clear()
            self._sequences.clear()
            return
        self._collections.pop(collection, None)
        self._sequences.pop(collection, None)
