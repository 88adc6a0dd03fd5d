"""Tests for RoleService."""

import pytest
from unittest.mock import AsyncMock

from rbac_api.common.exceptions import (
    ConflictError,
    ErrorKind,
    NotFoundError,
    RolesNotFoundError,
    StoreError,
    ValidationError,
)
from rbac_api.common.store import ROLES, USER_ROLES
from rbac_api.common.versioning import ApiVersion
from rbac_api.features.roles.models.domain import RoleV1, RoleV2
from rbac_api.features.roles.models.request import (
    RoleCreateRequest,
    RoleCreateV2Request,
    RoleUpdateRequest,
    RoleUpdateV2Request,
)


def create_request(name="editor", permissions=None, **extra):
    return RoleCreateV2Request(
        name=name,
        permissions=permissions if permissions is not None else ["read_user"],
        **extra
    )


class TestCreateRole:
    """Tests for role creation."""
    
    @pytest.mark.asyncio
    async def test_create_v2_role(self, role_service, store):
        role = await role_service.create_role(
            create_request(description="Edits users"),
            version=ApiVersion.V2
        )
        
        assert isinstance(role, RoleV2)
        assert role.version == 1
        assert role.metadata == {}
        assert role.description == "Edits users"
        assert role.created_at == role.updated_at
        
        stored = await store.get_by_id(ROLES, role.id)
        assert stored["name"] == "editor"
        assert stored["version"] == 1
        assert stored["metadata"] == {}
    
    @pytest.mark.asyncio
    async def test_create_v1_role_stores_base_shape(self, role_service, store):
        role = await role_service.create_role(
            RoleCreateRequest(name="viewer", permissions=["read_user"]),
            version=ApiVersion.V1
        )
        
        assert type(role) is RoleV1
        stored = await store.get_by_id(ROLES, role.id)
        assert "version" not in stored
        assert "metadata" not in stored
    
    @pytest.mark.asyncio
    async def test_default_version_is_latest(self, role_service):
        role = await role_service.create_role(create_request())
        
        assert isinstance(role, RoleV2)
    
    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, role_service):
        await role_service.create_role(create_request(name="admin"))
        
        with pytest.raises(ConflictError) as exc_info:
            await role_service.create_role(create_request(name="admin"))
        
        assert exc_info.value.message == "Role name is already taken"
        assert exc_info.value.kind == ErrorKind.CONFLICT
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, ""])
    async def test_name_is_required(self, role_service, name):
        with pytest.raises(ValidationError, match="Role name is required"):
            await role_service.create_role(create_request(name=name))
    
    @pytest.mark.asyncio
    async def test_permissions_required(self, role_service):
        with pytest.raises(ValidationError, match="Role must have at least one permission"):
            await role_service.create_role(create_request(permissions=[]))
    
    @pytest.mark.asyncio
    async def test_invalid_permissions_are_listed(self, role_service):
        with pytest.raises(ValidationError) as exc_info:
            await role_service.create_role(
                create_request(permissions=["read_user", "fly", "teleport"])
            )
        
        assert exc_info.value.message == "Invalid permissions: fly, teleport"
    
    @pytest.mark.asyncio
    async def test_duplicate_permissions_rejected(self, role_service):
        with pytest.raises(ValidationError, match="Duplicate permissions are not allowed"):
            await role_service.create_role(create_request(permissions=["read_user", "read_user"]))
    
    @pytest.mark.asyncio
    async def test_validation_runs_before_store_access(self, role_service):
        role_service.roles.find_by_name = AsyncMock()
        
        with pytest.raises(ValidationError):
            await role_service.create_role(create_request(permissions=["nope"]))
        
        role_service.roles.find_by_name.assert_not_called()


class TestReadRoles:
    """Tests for role lookups."""
    
    @pytest.mark.asyncio
    async def test_get_missing_role_returns_none(self, role_service):
        assert await role_service.get_role("missing") is None
    
    @pytest.mark.asyncio
    async def test_get_role_in_requested_version(self, role_service):
        created = await role_service.create_role(create_request(), version=ApiVersion.V2)
        
        role = await role_service.get_role(created.id, version=ApiVersion.V1)
        
        assert type(role) is RoleV1
        assert role.name == "editor"
    
    @pytest.mark.asyncio
    async def test_get_all_roles_is_normalized(self, role_service):
        await role_service.create_role(create_request(name="a"), version=ApiVersion.V1)
        await role_service.create_role(create_request(name="b"), version=ApiVersion.V2)
        
        roles = await role_service.get_all_roles(version=ApiVersion.V2)
        
        assert [role.name for role in roles] == ["a", "b"]
        assert all(isinstance(role, RoleV2) for role in roles)
        assert roles[0].version == 1
    
    @pytest.mark.asyncio
    async def test_get_role_by_name(self, role_service):
        created = await role_service.create_role(create_request(name="auditor"))
        
        found = await role_service.get_role_by_name("auditor")
        
        assert found.id == created.id
        assert await role_service.get_role_by_name("nobody") is None


class TestUpdateRole:
    """Tests for role updates."""
    
    @pytest.mark.asyncio
    async def test_update_missing_role(self, role_service):
        with pytest.raises(NotFoundError, match="Role not found"):
            await role_service.update_role("missing", RoleUpdateRequest(name="x"))
    
    @pytest.mark.asyncio
    async def test_partial_update_merges(self, role_service):
        created = await role_service.create_role(
            create_request(name="editor", permissions=["read_user"], description="d")
        )
        
        updated = await role_service.update_role(
            created.id,
            RoleUpdateV2Request(permissions=["read_user", "update_user"])
        )
        
        assert updated.name == "editor"
        assert updated.description == "d"
        assert updated.permissions == ["read_user", "update_user"]
        assert updated.created_at == created.created_at
    
    @pytest.mark.asyncio
    async def test_update_keeps_own_name(self, role_service):
        created = await role_service.create_role(create_request(name="editor"))
        
        updated = await role_service.update_role(created.id, RoleUpdateRequest(name="editor"))
        
        assert updated.name == "editor"
    
    @pytest.mark.asyncio
    async def test_update_to_other_roles_name_conflicts(self, role_service):
        await role_service.create_role(create_request(name="admin"))
        editor = await role_service.create_role(create_request(name="editor"))
        
        with pytest.raises(ConflictError):
            await role_service.update_role(editor.id, RoleUpdateRequest(name="admin"))
    
    @pytest.mark.asyncio
    async def test_update_revalidates_permissions(self, role_service):
        created = await role_service.create_role(create_request())
        
        with pytest.raises(ValidationError, match="Invalid permissions: fly"):
            await role_service.update_role(created.id, RoleUpdateRequest(permissions=["fly"]))
        
        with pytest.raises(ValidationError, match="at least one permission"):
            await role_service.update_role(created.id, RoleUpdateRequest(permissions=[]))


class TestDeleteRole:
    """Tests for role deletion."""
    
    @pytest.mark.asyncio
    async def test_delete_missing_role_returns_false(self, role_service):
        assert await role_service.delete_role("missing") is False
    
    @pytest.mark.asyncio
    async def test_delete_unassigned_role(self, role_service):
        created = await role_service.create_role(create_request())
        
        assert await role_service.delete_role(created.id) is True
        assert await role_service.get_role(created.id) is None
    
    @pytest.mark.asyncio
    async def test_delete_assigned_role_conflicts(self, role_service, store):
        created = await role_service.create_role(create_request(name="admin"))
        await role_service.assign_roles_to_user_by_names("user-1", ["admin"])
        
        with pytest.raises(ConflictError, match="still assigned to users"):
            await role_service.delete_role(created.id)
        
        assert await store.get_by_id(ROLES, created.id) is not None


class TestAssignments:
    """Tests for assigning roles and deriving permissions."""
    
    @pytest.mark.asyncio
    async def test_assign_requires_at_least_one_role(self, role_service):
        with pytest.raises(ValidationError, match="User must have at least one role"):
            await role_service.assign_roles_to_user_by_names("user-1", [])
    
    @pytest.mark.asyncio
    async def test_assign_replaces_previous_roles(self, role_service, store):
        a = await role_service.create_role(create_request(name="a"))
        b = await role_service.create_role(create_request(name="b"))
        
        await role_service.assign_roles_to_user_by_names("user-1", ["a"])
        assignment = await role_service.assign_roles_to_user_by_names("user-1", ["b"])
        
        assert assignment.role_ids == [b.id]
        stored = await store.get_by_id(USER_ROLES, "user-1")
        assert stored["userId"] == "user-1"
        assert stored["roleIds"] == [b.id]
        assert "updatedAt" in stored
        assert a.id not in stored["roleIds"]
    
    @pytest.mark.asyncio
    async def test_missing_name_fails_whole_assignment(self, role_service, store):
        await role_service.create_role(create_request(name="a"))
        await role_service.create_role(create_request(name="b"))
        await role_service.assign_roles_to_user_by_names("user-1", ["a"])
        before = await store.get_by_id(USER_ROLES, "user-1")
        
        with pytest.raises(RolesNotFoundError) as exc_info:
            await role_service.assign_roles_to_user_by_names("user-1", ["a", "ghost", "b"])
        
        assert exc_info.value.missing_names == ["ghost"]
        assert exc_info.value.details == "Roles not found: ghost"
        assert exc_info.value.status_code == 404
        assert await store.get_by_id(USER_ROLES, "user-1") == before
    
    @pytest.mark.asyncio
    async def test_user_without_assignment_has_no_roles(self, role_service):
        assert await role_service.get_user_roles("nobody") == []
        assert await role_service.get_user_permissions("nobody") == []
    
    @pytest.mark.asyncio
    async def test_permissions_are_deduplicated_union(self, role_service):
        await role_service.create_role(create_request(name="r1", permissions=["create_user", "read_user"]))
        await role_service.create_role(create_request(name="r2", permissions=["read_user", "manage_roles"]))
        await role_service.assign_roles_to_user_by_names("user-1", ["r1", "r2"])
        
        permissions = await role_service.get_user_permissions("user-1")
        
        assert permissions == ["create_user", "read_user", "manage_roles"]
    
    @pytest.mark.asyncio
    async def test_dangling_role_ids_are_skipped(self, role_service, store):
        kept = await role_service.create_role(create_request(name="kept"))
        gone = await role_service.create_role(create_request(name="gone"))
        await role_service.assign_roles_to_user_by_names("user-1", ["kept", "gone"])
        await store.remove(ROLES, gone.id)
        
        roles = await role_service.get_user_roles("user-1", version=ApiVersion.V1)
        
        assert [role.id for role in roles] == [kept.id]


class TestStoreFailures:
    """Tests for store failure propagation."""
    
    @pytest.mark.asyncio
    async def test_store_error_propagates(self, role_service):
        role_service.roles.find_by_name = AsyncMock(side_effect=StoreError(details="timeout"))
        
        with pytest.raises(StoreError) as exc_info:
            await role_service.create_role(create_request())
        
        assert exc_info.value.kind == ErrorKind.UNKNOWN

