"""
User request models.
"""

import re
from typing import Optional
from pydantic import Field, field_validator

from rbac_api.common.models.base import CamelModel
from rbac_api.features.users.models.domain import AccountRole, UserStatus

EMAIL_PATTERN = re.compile(r'^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$')


def _normalize_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError('Invalid email format')
    return value.lower()


class UserCreateRequest(CamelModel):
    """Request model for creating a user."""
    
    name: str = Field(..., min_length=1, max_length=150, description="Display name")
    email: str = Field(..., max_length=320, description="User email address")
    role: AccountRole = Field(..., description="Account role tag")
    
    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format."""
        return _normalize_email(v)


class UserUpdateRequest(CamelModel):
    """Request model for updating a user. Only provided fields change."""
    
    name: Optional[str] = Field(None, min_length=1, max_length=150, description="Display name")
    email: Optional[str] = Field(None, max_length=320, description="User email address")
    role: Optional[AccountRole] = Field(None, description="Account role tag")
    status: Optional[UserStatus] = Field(None, description="Lifecycle status")
    
    @field_validator('email')
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Validate email format."""
        if v is None:
            return v
        return _normalize_email(v)
