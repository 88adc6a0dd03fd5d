"""
Domain models for users.
"""

from typing import Optional
from enum import Enum

from rbac_api.common.models.base import CamelModel


class AccountRole(str, Enum):
    """Flat account tag, independent of the Role entity."""
    ADMIN = "admin"
    USER = "user"


class UserStatus(str, Enum):
    """User lifecycle status; deletion moves a user to inactive."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class User(CamelModel):
    """User record as stored and returned."""
    
    # Identity
    id: str
    name: str
    email: str
    role: AccountRole
    status: UserStatus = UserStatus.ACTIVE
    
    # Timestamps (ISO-8601, UTC)
    created_at: str
    updated_at: str
    deleted_at: Optional[str] = None
    
    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE
