"""User models."""

from .domain import AccountRole, UserStatus, User
from .request import UserCreateRequest, UserUpdateRequest

__all__ = [
    "AccountRole",
    "UserStatus",
    "User",
    "UserCreateRequest",
    "UserUpdateRequest",
]
