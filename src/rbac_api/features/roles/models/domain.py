"""
Domain models for roles.

Role records are persisted in a superset shape: v1 writes only the base
fields, v2 also writes ``version``, ``description`` and ``metadata``.
"""

from typing import Optional, Dict, Any, List
from enum import Enum
from pydantic import Field, ConfigDict

from rbac_api.common.models.base import CamelModel


class Permission(str, Enum):
    """Closed set of permissions a role may grant."""
    CREATE_USER = "create_user"
    READ_USER = "read_user"
    UPDATE_USER = "update_user"
    DELETE_USER = "delete_user"
    ASSIGN_ROLES = "assign_roles"
    MANAGE_ROLES = "manage_roles"


AVAILABLE_PERMISSIONS: List[str] = [permission.value for permission in Permission]


class StoredRole(CamelModel):
    """Role record as found in the store."""
    
    model_config = ConfigDict(extra="ignore")
    
    # Identity
    id: str
    name: str
    permissions: List[str] = Field(default_factory=list)
    
    # Written by v2 only
    description: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    version: Optional[int] = None
    
    # Timestamps (ISO-8601, UTC)
    created_at: str
    updated_at: str


class RoleV1(CamelModel):
    """Role as exposed by API v1."""
    
    id: str
    name: str
    permissions: List[str]
    created_at: str
    updated_at: str


class RoleV2(RoleV1):
    """Role as exposed by API v2."""
    
    version: int = 1
    description: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class UserRoleAssignment(CamelModel):
    """Per-user record listing the role ids currently granted."""
    
    model_config = ConfigDict(extra="ignore")
    
    user_id: str
    role_ids: List[str] = Field(default_factory=list)
    updated_at: str
