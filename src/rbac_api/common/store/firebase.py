"""
Firebase Realtime Database store using the firebase-admin SDK.

The SDK is blocking, so every call is pushed to a worker thread with
``asyncio.to_thread``. Indexed lookups rely on the ``.indexOn`` rules in
``database.rules.json``.
"""
import asyncio
from typing import Any, Callable, Dict, Optional, TypeVar

import firebase_admin
from firebase_admin import credentials, db
from firebase_admin.exceptions import FirebaseError
from loguru import logger

from ..config.settings import Settings
from ..exceptions import StoreError
from ..utils import generate_uuid_v7
from .protocol import COLLECTIONS, Record

T = TypeVar("T")


def _as_records(value: Any) -> Dict[str, Record]:
    """Normalize a snapshot value into ``{key: record}``."""
    if not value:
        return {}
    if isinstance(value, list):
        # The SDK returns a list when every key looks like an array index
        return {str(index): record for index, record in enumerate(value) if record is not None}
    return dict(value)


class FirebaseDocumentStore:
    """Document store backed by Firebase Realtime Database."""
    
    name = "firebase"
    
    def __init__(self, app: firebase_admin.App):
        self._app = app
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "FirebaseDocumentStore":
        """
        Initialize a named firebase-admin app from settings.
        
        Raises:
            ConfigurationError: If credentials are missing
            StoreError: If the SDK rejects the credentials
        """
        service_account = settings.get_firebase_credentials()
        try:
            app = firebase_admin.get_app(settings.firebase_app_name)
        except ValueError:
            try:
                cred = credentials.Certificate(service_account)
                app = firebase_admin.initialize_app(
                    cred,
                    {"databaseURL": settings.app_database_url},
                    name=settings.firebase_app_name
                )
            except (ValueError, FirebaseError) as e:
                raise StoreError(
                    message="Failed to initialize Firebase",
                    details=str(e),
                    operation="initialize_app"
                )
        logger.info(f"Firebase store initialized for project {settings.app_project_id}")
        return cls(app)
    
    def _ref(self, path: str) -> db.Reference:
        return db.reference(path, app=self._app)
    
    async def _call(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        try:
            return await asyncio.to_thread(func, *args)
        except FirebaseError as e:
            logger.error(f"Firebase {operation} failed: {e}")
            raise StoreError(details=str(e), operation=operation)
    
    def new_key(self, collection: str) -> str:
        return generate_uuid_v7()
    
    async def find_by_field(self, collection: str, field: str, value: Any) -> Dict[str, Record]:
        query = self._ref(collection).order_by_child(field).equal_to(value)
        return _as_records(await self._call("find_by_field", query.get))
    
    async def scan_all(self, collection: str) -> Dict[str, Record]:
        return _as_records(await self._call("scan_all", self._ref(collection).get))
    
    async def get_by_id(self, collection: str, key: str) -> Optional[Record]:
        try:
            ref = self._ref(f"{collection}/{key}")
        except ValueError:
            # Keys containing . # $ [ ] cannot exist in the database
            logger.debug(f"Rejected invalid {collection} key: {key!r}")
            return None
        return await self._call("get_by_id", ref.get)
    
    async def put(self, collection: str, key: str, record: Record) -> None:
        await self._call("put", self._ref(f"{collection}/{key}").set, record)
    
    async def patch(self, collection: str, key: str, fields: Record) -> None:
        await self._call("patch", self._ref(f"{collection}/{key}").update, fields)
    
    async def remove(self, collection: str, key: str) -> None:
        await self._call("remove", self._ref(f"{collection}/{key}").delete)
    
    async def clear(self) -> None:
        for collection in COLLECTIONS:
            await self._call("clear", self._ref(collection).delete)
    
    async def close(self) -> None:
        await asyncio.to_thread(firebase_admin.delete_app, self._app)
