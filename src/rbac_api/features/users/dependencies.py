"""
Dependency injection for users feature.
"""

from typing import Optional

from fastapi import Query, Request

from rbac_api.common.exceptions import ValidationError
from rbac_api.common.models.pagination import PaginationParams
from rbac_api.features.users.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the UserService wired into the application container."""
    return request.app.state.container.user_service


def get_pagination_params(
    request: Request,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize", description="Items per page"),
) -> PaginationParams:
    """
    Pagination from the query string; the page size default and upper bound come from settings.
    
    Raises:
        ValidationError: If ``pageSize`` exceeds the configured maximum
    """
    settings = request.app.state.container.settings
    if page_size is not None and page_size > settings.max_page_size:
        raise ValidationError(
            "Invalid request",
            details=f"query.pageSize: Input should be less than or equal to {settings.max_page_size}"
        )
    return PaginationParams(page=page, page_size=page_size or settings.default_page_size)
