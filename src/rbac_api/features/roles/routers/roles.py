"""
Role endpoints.

One router factory serves every API version: the version is a dependency and
the request models are picked per version, so v1 and v2 share the handlers
and differ only in the transform applied to results.
"""
from typing import Callable, Dict, Tuple, Type

from fastapi import Depends, Request, Response, status
from fastapi.responses import JSONResponse

from rbac_api.common.models.envelope import error_response, success_response
from rbac_api.common.routers import SlashTolerantRouter, child_url, current_url, translate_errors
from rbac_api.common.versioning import ApiVersion
from rbac_api.features.roles.dependencies import get_role_service
from rbac_api.features.roles.models.request import (
    RoleAssignmentRequest,
    RoleCreateRequest,
    RoleCreateV2Request,
    RoleUpdateRequest,
    RoleUpdateV2Request,
)
from rbac_api.features.roles.services.role_service import RoleService


REQUEST_MODELS: Dict[ApiVersion, Tuple[Type[RoleCreateRequest], Type[RoleUpdateRequest]]] = {
    ApiVersion.V1: (RoleCreateRequest, RoleUpdateRequest),
    ApiVersion.V2: (RoleCreateV2Request, RoleUpdateV2Request),
}


def _role_not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_response("Role not found")
    )


def create_roles_router(
    body_version: ApiVersion,
    resolve_version: Callable[..., ApiVersion],
) -> SlashTolerantRouter:
    """
    Build the role router.

    Args:
        body_version: Version whose request models the router accepts
        resolve_version: Dependency yielding the negotiated version per request
    """
    create_model, update_model = REQUEST_MODELS[body_version]
    router = SlashTolerantRouter(prefix="/roles", tags=[f"Roles ({body_version.value})"])

    @router.post("", status_code=status.HTTP_201_CREATED)
    @translate_errors("Failed to create role")
    async def create_role(
        payload: create_model,
        request: Request,
        response: Response,
        version: ApiVersion = Depends(resolve_version),
        service: RoleService = Depends(get_role_service),
    ):
        """Create a role; ``Location`` points at the new resource."""
        role = await service.create_role(payload, version=version)
        location = child_url(request, role.id)
        response.headers["Location"] = location
        return success_response(role.to_record(), "created", location)

    @router.get("")
    @translate_errors("Failed to retrieve roles")
    async def list_roles(
        request: Request,
        version: ApiVersion = Depends(resolve_version),
        service: RoleService = Depends(get_role_service),
    ):
        """List every role."""
        roles = await service.get_all_roles(version=version)
        items = [role.to_record() for role in roles]
        return success_response({"items": items, "count": len(items)}, "success", current_url(request))

    @router.get("/users/{user_id}")
    @translate_errors("Failed to retrieve user roles")
    async def get_user_roles(
        user_id: str,
        version: ApiVersion = Depends(resolve_version),
        service: RoleService = Depends(get_role_service),
    ):
        """Roles assigned to a user."""
        roles = await service.get_user_roles(user_id, version=version)
        items = [role.to_record() for role in roles]
        return success_response({"items": items, "count": len(items)})

    @router.post("/users/{user_id}")
    @translate_errors("Failed to assign roles")
    async def assign_roles_to_user(
        user_id: str,
        payload: RoleAssignmentRequest,
        version: ApiVersion = Depends(resolve_version),
        service: RoleService = Depends(get_role_service),
    ):
        """Replace a user's roles with the roles named in the body."""
        await service.assign_roles_to_user_by_names(user_id, payload.roles)
        roles = await service.get_user_roles(user_id, version=version)
        return success_response(
            {
                "message": "Roles assigned successfully",
                "roles": [role.to_record() for role in roles],
            },
            "updated"
        )

    @router.get("/users/{user_id}/permissions")
    @translate_errors("Failed to retrieve user permissions")
    async def get_user_permissions(
        user_id: str,
        version: ApiVersion = Depends(resolve_version),
        service: RoleService = Depends(get_role_service),
    ):
        """Effective permissions of a user across all assigned roles."""
        permissions = await service.get_user_permissions(user_id)
        return success_response({"permissions": permissions, "count": len(permissions)})

    @router.get("/{role_id}")
    @translate_errors("Failed to retrieve role")
    async def get_role(
        role_id: str,
        request: Request,
        version: ApiVersion = Depends(resolve_version),
        service: RoleService = Depends(get_role_service),
    ):
        """Get a role by id."""
        role = await service.get_role(role_id, version=version)
        if role is None:
            return _role_not_found()
        return success_response(role.to_record(), "success", current_url(request))

    @router.put("/{role_id}")
    @translate_errors("Failed to update role")
    async def update_role(
        role_id: str,
        payload: update_model,
        request: Request,
        version: ApiVersion = Depends(resolve_version),
        service: RoleService = Depends(get_role_service),
    ):
        """Update the provided fields of a role."""
        role = await service.update_role(role_id, payload, version=version)
        return success_response(role.to_record(), "updated", current_url(request))

    @router.delete("/{role_id}")
    @translate_errors("Failed to delete role")
    async def delete_role(
        role_id: str,
        version: ApiVersion = Depends(resolve_version),
        service: RoleService = Depends(get_role_service),
    ):
        """Permanently delete a role that no user holds."""
        if not await service.delete_role(role_id):
            return _role_not_found()
        return success_response({"message": "Role deleted successfully"}, "deleted")

    return router
