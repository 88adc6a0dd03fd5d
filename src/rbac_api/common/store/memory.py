"""In-process document store for development and tests."""

import copy
from typing import Any, Dict, Optional

from ..utils import generate_uuid_v7
from .protocol import Record


class InMemoryDocumentStore:
    """Dict-of-dicts store preserving insertion order.
    
    Reads and writes are deep-copied so callers never alias stored state.
    """
    
    name = "memory"
    
    def __init__(self, data: Optional[Dict[str, Dict[str, Record]]] = None):
        self._data: Dict[str, Dict[str, Record]] = copy.deepcopy(data) if data else {}
    
    def new_key(self, collection: str) -> str:
        return generate_uuid_v7()
    
    def _collection(self, collection: str) -> Dict[str, Record]:
        return self._data.setdefault(collection, {})
    
    async def find_by_field(self, collection: str, field: str, value: Any) -> Dict[str, Record]:
        return {
            key: copy.deepcopy(record)
            for key, record in self._collection(collection).items()
            if record.get(field) == value
        }
    
    async def scan_all(self, collection: str) -> Dict[str, Record]:
        return copy.deepcopy(self._collection(collection))
    
    async def get_by_id(self, collection: str, key: str) -> Optional[Record]:
        record = self._collection(collection).get(key)
        return copy.deepcopy(record) if record is not None else None
    
    async def put(self, collection: str, key: str, record: Record) -> None:
        self._collection(collection)[key] = copy.deepcopy(record)
    
    async def patch(self, collection: str, key: str, fields: Record) -> None:
        existing = self._collection(collection).setdefault(key, {})
        existing.update(copy.deepcopy(fields))
    
    async def remove(self, collection: str, key: str) -> None:
        self._collection(collection).pop(key, None)
    
    async def clear(self) -> None:
        self._data.clear()
    
    async def close(self) -> None:
        pass
    
    def snapshot(self) -> Dict[str, Dict[str, Record]]:
        """Deep copy of the whole store."""
        return copy.deepcopy(self._data)
