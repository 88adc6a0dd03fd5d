"""
Service layer for role management.
"""

import asyncio
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from rbac_api.common.exceptions import (
    ValidationError,
    NotFoundError,
    ConflictError,
    RolesNotFoundError,
)
from rbac_api.common.utils import utc_now_iso
from rbac_api.common.versioning import ApiVersion, get_latest_version
from rbac_api.features.roles.models.domain import (
    AVAILABLE_PERMISSIONS,
    StoredRole,
    UserRoleAssignment,
)
from rbac_api.features.roles.models.request import (
    RoleCreateRequest,
    RoleUpdateRequest,
)
from rbac_api.features.roles.repositories import RoleRepository, UserRoleRepository
from rbac_api.features.roles.transformers import RoleView, transform

if TYPE_CHECKING:
    from loguru import Logger


class RoleService:
    """
    Role rules on top of the remote store.

    Name uniqueness and the role-in-use check are each a read followed by a
    write; the store offers no transaction, so concurrent requests can race.
    Results are shaped for the API version passed in, defaulting to the latest.
    """

    def __init__(
        self,
        roles: RoleRepository,
        user_roles: UserRoleRepository,
        log: "Logger",
    ):
        self.roles = roles
        self.user_roles = user_roles
        self.log = log

    @staticmethod
    def _resolve_version(version: Optional[ApiVersion]) -> ApiVersion:
        return version or get_latest_version()

    def _validate_name(self, name: Optional[str]) -> str:
        if not name:
            raise ValidationError("Role name is required")
        return name

    def _validate_permissions(self, permissions: Optional[List[str]]) -> List[str]:
        """
        Check a permission list against the closed permission set.

        Raises:
            ValidationError: If the list is empty, has unknown values or repeats a value
        """
        if not permissions:
            raise ValidationError("Role must have at least one permission")

        invalid = [p for p in permissions if p not in AVAILABLE_PERMISSIONS]
        if invalid:
            raise ValidationError(f"Invalid permissions: {', '.join(invalid)}")

        if len(set(permissions)) != len(permissions):
            raise ValidationError("Duplicate permissions are not allowed")

        return list(permissions)

    async def _is_role_name_taken(self, name: str, exclude_role_id: Optional[str] = None) -> bool:
        matches = await self.roles.find_by_name(name)
        return any(role_id != exclude_role_id for role_id in matches)

    async def create_role(
        self,
        request: RoleCreateRequest,
        version: Optional[ApiVersion] = None
    ) -> RoleView:
        """
        Create a role.

        Raises:
            ValidationError: Missing name or invalid permission list
            ConflictError: Name already used by another role
        """
        version = self._resolve_version(version)
        name = self._validate_name(request.name)
        permissions = self._validate_permissions(request.permissions)

        if await self._is_role_name_taken(name):
            self.log.warning(f"Role name already taken: {name}")
            raise ConflictError("Role name is already taken")

        now = utc_now_iso()
        role = StoredRole(
            id=self.roles.new_id(),
            name=name,
            permissions=permissions,
            created_at=now,
            updated_at=now,
        )
        if version == ApiVersion.V2:
            role.version = 1
            role.description = getattr(request, "description", None)
            role.metadata = getattr(request, "metadata", None) or {}

        await self.roles.save(role)
        self.log.info(f"Created role {role.id} ({role.name}) via {version.value}")
        return transform(role, version)

    async def get_role(
        self,
        role_id: str,
        version: Optional[ApiVersion] = None
    ) -> Optional[RoleView]:
        """Role shaped for ``version`` or None when absent."""
        role = await self.roles.get_by_id(role_id)
        if role is None:
            self.log.debug(f"Role {role_id} not found")
            return None
        return transform(role, self._resolve_version(version))

    async def get_all_roles(self, version: Optional[ApiVersion] = None) -> List[RoleView]:
        """Every role, shaped for ``version``."""
        version = self._resolve_version(version)
        roles = await self.roles.list_all()
        self.log.debug(f"Fetched {len(roles)} roles")
        return [transform(role, version) for role in roles]

    async def update_role(
        self,
        role_id: str,
        request: RoleUpdateRequest,
        version: Optional[ApiVersion] = None
    ) -> RoleView:
        """
        Merge the provided fields over an existing role.

        Raises:
            NotFoundError: Role does not exist
            ValidationError: Invalid name or permission list
            ConflictError: Name already used by another role
        """
        version = self._resolve_version(version)
        current = await self.roles.get_by_id(role_id)
        if current is None:
            raise NotFoundError("Role")

        changes: Dict[str, Any] = {
            field: value
            for field, value in request.model_dump(exclude_unset=True).items()
            if value is not None
        }

        if "name" in changes:
            self._validate_name(changes["name"])
            if await self._is_role_name_taken(changes["name"], exclude_role_id=role_id):
                self.log.warning(f"Role name already taken: {changes['name']}")
                raise ConflictError("Role name is already taken")

        if "permissions" in changes:
            changes["permissions"] = self._validate_permissions(changes["permissions"])

        updated = current.model_copy(update={**changes, "id": role_id, "updated_at": utc_now_iso()})
        await self.roles.save(updated)
        self.log.info(f"Updated role {role_id}: {', '.join(sorted(changes)) or 'no fields'}")
        return transform(updated, version)

    async def delete_role(self, role_id: str) -> bool:
        """
        Permanently remove a role that no user holds.

        Returns:
            False if the role does not exist

        Raises:
            ConflictError: Role is listed in some user's assignment record
        """
        role = await self.roles.get_by_id(role_id)
        if role is None:
            return False

        if await self.user_roles.is_role_assigned(role_id):
            self.log.warning(f"Refusing to delete role {role_id}: still assigned")
            raise ConflictError("Cannot delete role: it is still assigned to users")

        await self.roles.delete(role_id)
        self.log.info(f"Deleted role {role_id} ({role.name})")
        return True

    async def get_role_by_name(self, name: str) -> Optional[StoredRole]:
        """First role with this name in store order, or None."""
        matches = await self.roles.find_by_name(name)
        return next(iter(matches.values()), None)

    async def assign_roles_to_user_by_names(
        self,
        user_id: str,
        role_names: List[str]
    ) -> UserRoleAssignment:
        """
        Replace a user's roles with the roles named in ``role_names``.

        All names are resolved before anything is written, so a single miss
        leaves the existing assignment untouched.

        Raises:
            ValidationError: No names given
            RolesNotFoundError: Some names do not resolve (all of them are listed)
        """
        if not role_names:
            raise ValidationError("User must have at least one role")

        roles = await asyncio.gather(*(self.get_role_by_name(name) for name in role_names))

        missing = [name for name, role in zip(role_names, roles) if role is None]
        if missing:
            self.log.warning(f"Assignment for user {user_id} failed, unknown roles: {missing}")
            raise RolesNotFoundError(missing)

        assignment = UserRoleAssignment(
            user_id=user_id,
            role_ids=[role.id for role in roles],
            updated_at=utc_now_iso(),
        )
        await self.user_roles.replace(assignment)
        self.log.info(f"Assigned roles {role_names} to user {user_id}")
        return assignment

    async def _resolve_user_roles(self, user_id: str) -> List[StoredRole]:
        assignment = await self.user_roles.get(user_id)
        if assignment is None:
            return []

        roles = await asyncio.gather(*(self.roles.get_by_id(role_id) for role_id in assignment.role_ids))
        # Ids left behind by direct store edits are skipped
        return [role for role in roles if role is not None]

    async def get_user_roles(
        self,
        user_id: str,
        version: Optional[ApiVersion] = None
    ) -> List[RoleView]:
        """Roles currently assigned to the user; empty if none."""
        version = self._resolve_version(version)
        roles = await self._resolve_user_roles(user_id)
        return [transform(role, version) for role in roles]

    async def get_user_permissions(self, user_id: str) -> List[str]:
        """Union of the user's role permissions, in order of first appearance."""
        permissions: Dict[str, None] = {}
        for role in await self._resolve_user_roles(user_id):
            for permission in role.permissions:
                permissions.setdefault(permission, None)
        return list(permissions)
