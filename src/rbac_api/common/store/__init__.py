"""Document store abstraction and adapters."""

from .protocol import DocumentStore, Record, USERS, ROLES, USER_ROLES, COLLECTIONS
from .memory import InMemoryDocumentStore
from .factory import build_store

__all__ = [
    "DocumentStore",
    "Record",
    "USERS",
    "ROLES",
    "USER_ROLES",
    "COLLECTIONS",
    "InMemoryDocumentStore",
    "build_store",
]
