"""Test configuration and fixtures for the RBAC store API."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from loguru import logger

from rbac_api.app import create_app
from rbac_api.common.config import Settings
from rbac_api.common.store import InMemoryDocumentStore
from rbac_api.container import build_container
from rbac_api.features.roles.repositories import RoleRepository, UserRoleRepository
from rbac_api.features.roles.services import RoleService
from rbac_api.features.users.repositories import UserRepository
from rbac_api.features.users.services import UserService


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        store_backend="memory",
        environment="test",
        log_requests=False,
    )


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryDocumentStore()


@pytest.fixture
def test_logger():
    """Logger injected into services under test."""
    return logger.bind(component="test")


@pytest.fixture
def role_service(store, test_logger):
    """RoleService over the in-memory store."""
    return RoleService(RoleRepository(store), UserRoleRepository(store), log=test_logger)


@pytest.fixture
def user_service(store, test_logger):
    """UserService over the in-memory store."""
    return UserService(UserRepository(store), log=test_logger)


@pytest.fixture
def container(settings, store):
    """Application container over the in-memory store."""
    return build_container(settings, store=store)


@pytest.fixture
def app(container):
    """Create FastAPI test app."""
    return create_app(container=container)


@pytest_asyncio.fixture
async def async_client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
