"""RBAC Store API application factory.

Wires settings, logging, the store container, middleware, exception handlers
and routers into a FastAPI application.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from rbac_api.common.config import LoggingConfig, Settings, get_settings
from rbac_api.common.exception_handlers import register_exception_handlers
from rbac_api.common.middleware import StructuredLoggingMiddleware
from rbac_api.container import Container, build_container
from rbac_api.features.roles.routers import include_role_routers
from rbac_api.features.system.routers import router as system_router
from rbac_api.features.users.routers import router as users_router


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None
) -> FastAPI:
    """Create the application.
    
    Args:
        settings: Settings to use (defaults to the cached environment settings)
        container: Prebuilt container; when omitted the lifespan builds one
            from settings and closes it on shutdown
    
    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = container.settings if container is not None else get_settings()
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        if not LoggingConfig.is_configured():
            LoggingConfig.configure(settings)
        
        owns_container = getattr(app.state, "container", None) is None
        if owns_container:
            app.state.container = build_container(settings)
        logger.info(
            f"{settings.app_name} {settings.app_version} started "
            f"(environment={settings.environment}, store={app.state.container.store.name})"
        )
        
        yield
        
        if owns_container:
            await app.state.container.close()
        logger.info(f"{settings.app_name} stopped")
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="User, role and permission store with versioned role endpoints",
        debug=settings.debug,
        lifespan=lifespan,
    )
    
    if container is not None:
        app.state.container = container
    
    app.add_middleware(
        StructuredLoggingMiddleware,
        log_requests=settings.log_requests,
        exclude_paths=[f"{settings.api_prefix}/health", "/docs", "/openapi.json"],
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Request-ID", "X-Correlation-ID", "X-Process-Time"],
    )
    
    register_exception_handlers(app, is_production=settings.is_production)
    
    app.include_router(system_router, prefix=settings.api_prefix)
    # Users first so /users/... never reaches the /{version}/roles catch-all
    app.include_router(users_router, prefix=settings.api_prefix)
    include_role_routers(app, prefix=settings.api_prefix)
    
    logger.debug(f"Created {settings.app_name} application")
    return app
