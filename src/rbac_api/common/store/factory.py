"""Store selection from settings."""

from loguru import logger

from ..config.settings import Settings
from .protocol import DocumentStore


def build_store(settings: Settings) -> DocumentStore:
    """Build the store named by ``settings.store_backend``."""
    if settings.store_backend == "firebase":
        from .firebase import FirebaseDocumentStore
        return FirebaseDocumentStore.from_settings(settings)
    
    from .memory import InMemoryDocumentStore
    logger.warning("Using in-memory store; data is lost on restart")
    return InMemoryDocumentStore()
