"""
Dependency injection for roles feature.
"""

from typing import Callable

from fastapi import Request

from rbac_api.common.versioning import ApiVersion, negotiate_version
from rbac_api.features.roles.services.role_service import RoleService


def get_role_service(request: Request) -> RoleService:
    """
    Return the RoleService wired into the application container.
    
    Returns:
        RoleService: Service instance for role operations
    """
    return request.app.state.container.role_service


def version_dependency(version: ApiVersion) -> Callable[[], ApiVersion]:
    """
    Build a dependency that resolves to ``version`` while it stays active.
    
    Raises:
        UnsupportedVersionError: At request time, if ``version`` was deactivated
    """
    def resolve_version() -> ApiVersion:
        return negotiate_version(version.value)
    
    return resolve_version


def latest_version() -> ApiVersion:
    """Dependency for unprefixed routes: the latest active version."""
    return negotiate_version(None)


def reject_unknown_version(version: str) -> None:
    """Dependency for ``/{version}/roles`` paths no versioned router matched."""
    negotiate_version(version)
