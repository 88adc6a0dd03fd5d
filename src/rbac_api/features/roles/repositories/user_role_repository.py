"""
Repository for user-role assignment records.

There is no reverse index from role to users, so membership checks scan
every assignment record.
"""

from typing import List, Optional

from rbac_api.common.store import DocumentStore, USER_ROLES
from rbac_api.features.roles.models.domain import UserRoleAssignment


class UserRoleRepository:
    """Store access for the ``user_roles`` collection, keyed by user id."""
    
    def __init__(self, store: DocumentStore):
        self.store = store
    
    async def get(self, user_id: str) -> Optional[UserRoleAssignment]:
        record = await self.store.get_by_id(USER_ROLES, user_id)
        if record is None:
            return None
        return UserRoleAssignment.model_validate({**record, "userId": user_id})
    
    async def replace(self, assignment: UserRoleAssignment) -> None:
        """Overwrite the user's assignment record wholesale."""
        await self.store.put(USER_ROLES, assignment.user_id, assignment.to_record())
    
    async def list_all(self) -> List[UserRoleAssignment]:
        records = await self.store.scan_all(USER_ROLES)
        return [
            UserRoleAssignment.model_validate({**record, "userId": key})
            for key, record in records.items()
        ]
    
    async def is_role_assigned(self, role_id: str) -> bool:
        """True if any assignment record lists ``role_id``."""
        assignments = await self.list_all()
        return any(role_id in assignment.role_ids for assignment in assignments)
