"""Shared API models."""

from .base import CamelModel
from .pagination import PaginationParams, PaginationInfo
from .envelope import (
    Link,
    ErrorBody,
    Envelope,
    success_response,
    error_response,
    paginated_response,
    error_json_response,
)

__all__ = [
    "CamelModel",
    "PaginationParams",
    "PaginationInfo",
    "Link",
    "ErrorBody",
    "Envelope",
    "success_response",
    "error_response",
    "paginated_response",
    "error_json_response",
]
