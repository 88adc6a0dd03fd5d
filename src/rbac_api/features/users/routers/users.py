"""
User endpoints.
"""
import asyncio

from fastapi import Depends, Request, Response, status
from fastapi.responses import JSONResponse

from rbac_api.common.models.envelope import error_response, paginated_response, success_response
from rbac_api.common.models.pagination import PaginationParams
from rbac_api.common.routers import SlashTolerantRouter, child_url, current_url, translate_errors
from rbac_api.features.users.dependencies import get_pagination_params, get_user_service
from rbac_api.features.users.models.request import UserCreateRequest, UserUpdateRequest
from rbac_api.features.users.services.user_service import UserService


router = SlashTolerantRouter(prefix="/users", tags=["Users"])


def _user_not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_response("User not found")
    )


@router.post("", status_code=status.HTTP_201_CREATED)
@translate_errors("Failed to create user")
async def create_user(
    payload: UserCreateRequest,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """Create a user; ``Location`` points at the new resource."""
    user = await service.create_user(payload)
    location = child_url(request, user.id)
    response.headers["Location"] = location
    return success_response(user.to_record(), "created", location)


@router.get("")
@translate_errors("Failed to retrieve users")
async def list_users(
    request: Request,
    pagination: PaginationParams = Depends(get_pagination_params),
    service: UserService = Depends(get_user_service),
):
    """
    List active users, one page at a time.
    
    The page and the total count are fetched concurrently.
    """
    users, total_items = await asyncio.gather(
        service.get_all_users(pagination.offset, pagination.limit),
        service.get_user_count(),
    )
    return paginated_response(
        [user.to_record() for user in users],
        pagination.page,
        pagination.page_size,
        total_items,
        current_url(request)
    )


@router.get("/{user_id}")
@translate_errors("Failed to retrieve user")
async def get_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """Get a user by id, including deactivated users."""
    user = await service.get_user(user_id)
    if user is None:
        return _user_not_found()
    return success_response(user.to_record(), "success", current_url(request))


@router.put("/{user_id}")
@translate_errors("Failed to update user")
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    request: Request,
    service: UserService = Depends(get_user_service),
):
    """Update the provided fields of a user."""
    user = await service.update_user(user_id, payload)
    return success_response(user.to_record(), "updated", current_url(request))


@router.delete("/{user_id}")
@translate_errors("Failed to deactivate user")
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    """Deactivate a user; the record is kept."""
    user = await service.delete_user(user_id)
    if user is None:
        return _user_not_found()
    return success_response(
        {"message": "User deactivated successfully", "user": user.to_record()},
        "deactivated"
    )
