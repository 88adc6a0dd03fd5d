"""Role routers."""

from .roles import create_roles_router
from .versions import include_role_routers

__all__ = ["create_roles_router", "include_role_routers"]
