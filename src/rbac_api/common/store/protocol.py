"""Protocol for the remote hierarchical document store.

Records live under one collection root per entity (``users``, ``roles``,
``user_roles``) keyed by an opaque string. The store offers indexed equality
queries on a single field, whole-record reads and writes, and nothing
transactional: every check-then-write in the services is two round trips.
"""

from abc import abstractmethod
from typing import Any, Dict, Optional, Protocol, runtime_checkable


USERS = "users"
ROLES = "roles"
USER_ROLES = "user_roles"

COLLECTIONS = (USERS, ROLES, USER_ROLES)

Record = Dict[str, Any]


@runtime_checkable
class DocumentStore(Protocol):
    """Async access to a keyed document store."""
    
    name: str
    
    @abstractmethod
    def new_key(self, collection: str) -> str:
        """Allocate a fresh record key for ``collection``."""
        ...
    
    @abstractmethod
    async def find_by_field(self, collection: str, field: str, value: Any) -> Dict[str, Record]:
        """Records whose ``field`` equals ``value``, keyed by record key, in store order."""
        ...
    
    @abstractmethod
    async def scan_all(self, collection: str) -> Dict[str, Record]:
        """Every record of ``collection`` keyed by record key, in store order."""
        ...
    
    @abstractmethod
    async def get_by_id(self, collection: str, key: str) -> Optional[Record]:
        """The record stored under ``key`` or None."""
        ...
    
    @abstractmethod
    async def put(self, collection: str, key: str, record: Record) -> None:
        """Replace the record stored under ``key``."""
        ...
    
    @abstractmethod
    async def patch(self, collection: str, key: str, fields: Record) -> None:
        """Shallow-merge ``fields`` into the record stored under ``key``."""
        ...
    
    @abstractmethod
    async def remove(self, collection: str, key: str) -> None:
        """Remove the record stored under ``key``."""
        ...
    
    @abstractmethod
    async def clear(self) -> None:
        """Remove every collection."""
        ...
    
    @abstractmethod
    async def close(self) -> None:
        """Release client resources."""
        ...
