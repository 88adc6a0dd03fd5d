"""Role repositories."""

from .role_repository import RoleRepository
from .user_role_repository import UserRoleRepository

__all__ = ["RoleRepository", "UserRoleRepository"]
