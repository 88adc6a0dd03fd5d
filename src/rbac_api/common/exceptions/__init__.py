"""
Common exceptions module.
"""

from .base import (
    ErrorKind,
    HTTP_STATUS_MAP,
    RbacApiError,
    ValidationError,
    NotFoundError,
    ConflictError,
    UnknownError,
    StoreError,
    ConfigurationError,
    RolesNotFoundError,
    UnsupportedVersionError,
)

__all__ = [
    "ErrorKind",
    "HTTP_STATUS_MAP",
    "RbacApiError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "UnknownError",
    "StoreError",
    "ConfigurationError",
    "RolesNotFoundError",
    "UnsupportedVersionError",
]
