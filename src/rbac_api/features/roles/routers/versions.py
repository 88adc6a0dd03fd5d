"""
Mounting of the role router for every registered API version.
"""
from fastapi import APIRouter, Depends, FastAPI, status
from fastapi.responses import JSONResponse
from loguru import logger

from rbac_api.common.models.envelope import error_response
from rbac_api.common.versioning import SUPPORTED_VERSIONS, get_latest_version
from rbac_api.features.roles.dependencies import (
    latest_version,
    reject_unknown_version,
    version_dependency,
)
from rbac_api.features.roles.routers.roles import create_roles_router

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

unknown_version_router = APIRouter(include_in_schema=False)


UNKNOWN_VERSION_DEPS = [Depends(reject_unknown_version)]


@unknown_version_router.api_route("/{version}/roles", methods=ALL_METHODS, dependencies=UNKNOWN_VERSION_DEPS)
@unknown_version_router.api_route("/{version}/roles/{rest:path}", methods=ALL_METHODS, dependencies=UNKNOWN_VERSION_DEPS)
async def unknown_version(version: str):
    """Requests under a version prefix that no versioned router matched."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_response("Not Found")
    )


def include_role_routers(app: FastAPI, prefix: str = "") -> None:
    """
    Mount ``/{version}/roles`` for each registered version, ``/roles`` for the
    latest one, and a catch-all rejecting unknown versions.
    
    Inactive versions stay mounted and answer 400 until reactivated.
    """
    for entry in SUPPORTED_VERSIONS:
        app.include_router(
            create_roles_router(entry.version, version_dependency(entry.version)),
            prefix=f"{prefix}/{entry.version.value}"
        )
        logger.debug(f"Mounted {prefix}/{entry.version.value}/roles")
    
    latest = get_latest_version()
    app.include_router(create_roles_router(latest, latest_version), prefix=prefix)
    logger.debug(f"Mounted {prefix}/roles (latest: {latest.value})")
    
    app.include_router(unknown_version_router, prefix=prefix)
