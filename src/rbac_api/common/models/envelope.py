"""
Uniform response envelope.

Every response body, success or failure, has the shape::

    {"data": ..., "status": "...", "error"?: {...}, "_links"?: {...}, "pagination"?: {...}}
"""
from typing import Any, Dict, List, Optional

from fastapi.responses import JSONResponse
from pydantic import Field

from .base import CamelModel
from .pagination import PaginationInfo
from ..exceptions import RbacApiError


class Link(CamelModel):
    """Hypermedia link."""
    href: str


class ErrorBody(CamelModel):
    """Error block of a failed envelope."""
    message: str
    details: Optional[str] = None


class Envelope(CamelModel):
    """Standard API response wrapper."""
    data: Any = None
    status: str = "success"
    error: Optional[ErrorBody] = None
    links: Optional[Dict[str, Link]] = Field(None, alias="_links")
    pagination: Optional[PaginationInfo] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize, keeping ``data`` even when it is null."""
        rest = self.model_dump(by_alias=True, exclude_none=True, exclude={"data"})
        return {"data": self.data, **rest}


def success_response(
    data: Any,
    status: str = "success",
    self_href: Optional[str] = None
) -> Dict[str, Any]:
    """Wrap ``data`` in a success envelope with an optional self link."""
    links = {"self": Link(href=self_href)} if self_href else None
    return Envelope(data=data, status=status, links=links).to_dict()


def error_response(
    message: str,
    details: Optional[str] = None,
    status: str = "error"
) -> Dict[str, Any]:
    """Build an error envelope; ``details`` is omitted when empty."""
    return Envelope(
        data=None,
        status=status,
        error=ErrorBody(message=message, details=details or None)
    ).to_dict()


def _page_href(base_url: str, page: int, page_size: int) -> str:
    return f"{base_url}?page={page}&pageSize={page_size}"


def paginated_response(
    items: List[Any],
    page: int,
    page_size: int,
    total_items: int,
    base_url: str
) -> Dict[str, Any]:
    """
    Build a paginated envelope.
    
    ``prev`` is present only past the first page and ``next`` only before the
    last one. ``last`` never points below page 1.
    """
    pagination = PaginationInfo.create(page, page_size, total_items)
    
    links = {
        "self": Link(href=_page_href(base_url, page, page_size)),
        "first": Link(href=_page_href(base_url, 1, page_size)),
    }
    if pagination.has_previous:
        links["prev"] = Link(href=_page_href(base_url, page - 1, page_size))
    if pagination.has_next:
        links["next"] = Link(href=_page_href(base_url, page + 1, page_size))
    links["last"] = Link(href=_page_href(base_url, max(pagination.total_pages, 1), page_size))
    
    return Envelope(
        data={"items": items, "count": len(items)},
        status="success",
        links=links,
        pagination=pagination
    ).to_dict()


def error_json_response(exc: RbacApiError) -> JSONResponse:
    """Render a typed error as an envelope with its kind's status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.message, exc.details)
    )
