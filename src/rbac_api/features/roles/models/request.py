"""
Role request models.

Name and permission rules are enforced by ``RoleService`` so that missing and
invalid values produce the same messages regardless of the entry point.
"""

from typing import Optional, Dict, Any, List
from pydantic import Field

from rbac_api.common.models.base import CamelModel


class RoleCreateRequest(CamelModel):
    """Request model for creating a role (v1)."""
    
    name: Optional[str] = Field(None, max_length=100, description="Unique role name")
    permissions: Optional[List[str]] = Field(None, description="Permissions granted by the role")


class RoleCreateV2Request(RoleCreateRequest):
    """Request model for creating a role (v2)."""
    
    description: Optional[str] = Field(None, max_length=500, description="Role description")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Free-form metadata")


class RoleUpdateRequest(CamelModel):
    """Request model for updating a role (v1). Only provided fields change."""
    
    name: Optional[str] = Field(None, max_length=100, description="Unique role name")
    permissions: Optional[List[str]] = Field(None, description="Permissions granted by the role")


class RoleUpdateV2Request(RoleUpdateRequest):
    """Request model for updating a role (v2)."""
    
    description: Optional[str] = Field(None, max_length=500, description="Role description")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Free-form metadata")


class RoleAssignmentRequest(CamelModel):
    """Request model for assigning roles to a user by name."""
    
    roles: List[str] = Field(..., description="Names of the roles to grant")
