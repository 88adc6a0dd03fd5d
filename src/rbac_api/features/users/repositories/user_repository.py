"""
Repository for user records.
"""

from typing import Dict, List, Optional

from rbac_api.common.store import DocumentStore, Record, USERS
from rbac_api.features.users.models.domain import User, UserStatus


class UserRepository:
    """Store access for the ``users`` collection."""
    
    def __init__(self, store: DocumentStore):
        self.store = store
    
    @staticmethod
    def _to_user(key: str, record: Record) -> User:
        return User.model_validate({**record, "id": key})
    
    def new_id(self) -> str:
        """Allocate an id for a user about to be created."""
        return self.store.new_key(USERS)
    
    async def get_by_id(self, user_id: str) -> Optional[User]:
        record = await self.store.get_by_id(USERS, user_id)
        if not record:
            return None
        return self._to_user(user_id, record)
    
    async def find_by_email(self, email: str) -> Dict[str, User]:
        """Users with this email in any status, keyed by id."""
        matches = await self.store.find_by_field(USERS, "email", email)
        return {key: self._to_user(key, record) for key, record in matches.items()}
    
    async def list_active(self) -> List[User]:
        """Every active user in store order."""
        matches = await self.store.find_by_field(USERS, "status", UserStatus.ACTIVE.value)
        return [self._to_user(key, record) for key, record in matches.items()]
    
    async def save(self, user: User) -> None:
        """Write the whole user record."""
        await self.store.put(USERS, user.id, user.to_record())
