"""Role models."""

from .domain import (
    Permission,
    AVAILABLE_PERMISSIONS,
    StoredRole,
    RoleV1,
    RoleV2,
    UserRoleAssignment,
)
from .request import (
    RoleCreateRequest,
    RoleCreateV2Request,
    RoleUpdateRequest,
    RoleUpdateV2Request,
    RoleAssignmentRequest,
)

__all__ = [
    "Permission",
    "AVAILABLE_PERMISSIONS",
    "StoredRole",
    "RoleV1",
    "RoleV2",
    "UserRoleAssignment",
    "RoleCreateRequest",
    "RoleCreateV2Request",
    "RoleUpdateRequest",
    "RoleUpdateV2Request",
    "RoleAssignmentRequest",
]
