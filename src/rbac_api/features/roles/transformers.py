"""
Conversion of role records between API versions.
"""
from typing import Union

from rbac_api.common.versioning import ApiVersion
from rbac_api.features.roles.models.domain import StoredRole, RoleV1, RoleV2

AnyRole = Union[StoredRole, RoleV1, RoleV2]
RoleView = Union[RoleV1, RoleV2]


def to_v1(role: AnyRole) -> RoleV1:
    """Drop the v2-only fields."""
    return RoleV1(
        id=role.id,
        name=role.name,
        permissions=list(role.permissions),
        created_at=role.created_at,
        updated_at=role.updated_at,
    )


def to_v2(role: AnyRole) -> RoleV2:
    """Keep v2 fields that exist; synthesize ``version=1`` and ``metadata={}`` otherwise."""
    version = getattr(role, "version", None)
    metadata = getattr(role, "metadata", None)
    return RoleV2(
        id=role.id,
        name=role.name,
        permissions=list(role.permissions),
        created_at=role.created_at,
        updated_at=role.updated_at,
        version=version if version is not None else 1,
        description=getattr(role, "description", None),
        metadata=dict(metadata) if metadata is not None else {},
    )


def transform(role: AnyRole, target: ApiVersion) -> RoleView:
    """Shape ``role`` for the ``target`` API version."""
    if target == ApiVersion.V1:
        return to_v1(role)
    return to_v2(role)
