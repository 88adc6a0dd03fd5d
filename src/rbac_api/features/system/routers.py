"""
Hello and health endpoints.
"""
from fastapi import Request

from rbac_api.common.routers import SlashTolerantRouter
from rbac_api.common.utils import utc_now_iso


router = SlashTolerantRouter(tags=["System"])


@router.get("/hello")
async def hello():
    """Liveness greeting."""
    return {
        "message": "Hello from the RBAC Store API!",
        "timestamp": utc_now_iso()
    }


@router.get("/health")
async def health(request: Request):
    """Health summary of the running service."""
    container = request.app.state.container
    return {
        "status": "healthy",
        "version": container.settings.app_version,
        "environment": container.settings.environment,
        "store": container.store.name,
    }
