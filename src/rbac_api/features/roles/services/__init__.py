"""Role services."""

from .role_service import RoleService

__all__ = ["RoleService"]
