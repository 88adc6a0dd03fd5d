"""
Explicit wiring of the store, repositories and services.

Services receive their logger here instead of reaching for a global one.
"""
from dataclasses import dataclass
from typing import Optional

from rbac_api.common.config import LoggingConfig, Settings
from rbac_api.common.store import DocumentStore, build_store
from rbac_api.features.roles.repositories import RoleRepository, UserRoleRepository
from rbac_api.features.roles.services import RoleService
from rbac_api.features.users.repositories import UserRepository
from rbac_api.features.users.services import UserService


@dataclass
class Container:
    """Application-scoped objects shared by every request."""
    settings: Settings
    store: DocumentStore
    role_service: RoleService
    user_service: UserService
    
    async def close(self) -> None:
        await self.store.close()


def build_container(settings: Settings, store: Optional[DocumentStore] = None) -> Container:
    """
    Build the container, creating the configured store unless one is given.
    
    Raises:
        ConfigurationError: If the configured store lacks credentials
    """
    if store is None:
        settings.validate_store_config()
        store = build_store(settings)
    
    role_service = RoleService(
        RoleRepository(store),
        UserRoleRepository(store),
        log=LoggingConfig.get_logger("role_service", store=store.name),
    )
    user_service = UserService(
        UserRepository(store),
        log=LoggingConfig.get_logger("user_service", store=store.name),
    )
    
    return Container(
        settings=settings,
        store=store,
        role_service=role_service,
        user_service=user_service,
    )
