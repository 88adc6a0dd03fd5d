"""
Repository for role records.
"""

from typing import Dict, List, Optional

from rbac_api.common.store import DocumentStore, Record, ROLES
from rbac_api.features.roles.models.domain import StoredRole


class RoleRepository:
    """Store access for the ``roles`` collection."""
    
    def __init__(self, store: DocumentStore):
        self.store = store
    
    @staticmethod
    def _to_role(key: str, record: Record) -> StoredRole:
        return StoredRole.model_validate({**record, "id": key})
    
    def new_id(self) -> str:
        """Allocate an id for a role about to be created."""
        return self.store.new_key(ROLES)
    
    async def get_by_id(self, role_id: str) -> Optional[StoredRole]:
        record = await self.store.get_by_id(ROLES, role_id)
        if record is None:
            return None
        return self._to_role(role_id, record)
    
    async def find_by_name(self, name: str) -> Dict[str, StoredRole]:
        """Roles with exactly this name, keyed by id, in store order."""
        matches = await self.store.find_by_field(ROLES, "name", name)
        return {key: self._to_role(key, record) for key, record in matches.items()}
    
    async def list_all(self) -> List[StoredRole]:
        records = await self.store.scan_all(ROLES)
        return [self._to_role(key, record) for key, record in records.items()]
    
    async def save(self, role: StoredRole) -> None:
        """Write the whole role record."""
        await self.store.put(ROLES, role.id, role.to_record())
    
    async def delete(self, role_id: str) -> None:
        await self.store.remove(ROLES, role_id)
