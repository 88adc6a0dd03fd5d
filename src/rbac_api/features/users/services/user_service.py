"""
Service layer for user management.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from rbac_api.common.exceptions import ConflictError, NotFoundError
from rbac_api.common.utils import utc_now_iso
from rbac_api.features.users.models.domain import User, UserStatus
from rbac_api.features.users.models.request import UserCreateRequest, UserUpdateRequest
from rbac_api.features.users.repositories import UserRepository

if TYPE_CHECKING:
    from loguru import Logger


def _email_in_use() -> ConflictError:
    return ConflictError(
        "Email is already in use",
        details="Please use a different email address"
    )


class UserService:
    """
    User rules on top of the remote store.
    
    Email uniqueness spans every status. Deleting a user is a soft transition
    to ``inactive``; records are never removed.
    """
    
    def __init__(self, users: UserRepository, log: "Logger"):
        self.users = users
        self.log = log
    
    async def _is_email_taken(self, email: str, exclude_user_id: Optional[str] = None) -> bool:
        matches = await self.users.find_by_email(email)
        return any(user_id != exclude_user_id for user_id in matches)
    
    async def create_user(self, request: UserCreateRequest) -> User:
        """
        Create an active user.
        
        Raises:
            ConflictError: Email already used by any user
        """
        if await self._is_email_taken(request.email):
            self.log.warning(f"Email already in use: {request.email}")
            raise _email_in_use()
        
        now = utc_now_iso()
        user = User(
            id=self.users.new_id(),
            name=request.name,
            email=request.email,
            role=request.role,
            status=UserStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )
        await self.users.save(user)
        self.log.info(f"Created user {user.id}")
        return user
    
    async def get_user(self, user_id: str) -> Optional[User]:
        """User in any status, or None when absent."""
        return await self.users.get_by_id(user_id)
    
    async def get_all_users(self, skip: int = 0, limit: int = 10) -> List[User]:
        """
        One page of active users.
        
        The whole active set is fetched and sliced here; the store only
        filters on status.
        """
        users = await self.users.list_active()
        self.log.debug(f"Fetched {len(users)} active users, returning [{skip}:{skip + limit}]")
        return users[skip:skip + limit]
    
    async def get_user_count(self) -> int:
        """Number of active users."""
        return len(await self.users.list_active())
    
    async def update_user(self, user_id: str, request: UserUpdateRequest) -> User:
        """
        Merge the provided fields over an existing user.
        
        Raises:
            NotFoundError: User does not exist
            ConflictError: Email already used by another user
        """
        current = await self.users.get_by_id(user_id)
        if current is None:
            raise NotFoundError("User")
        
        changes: Dict[str, Any] = {
            field: value
            for field, value in request.model_dump(exclude_unset=True).items()
            if value is not None
        }
        
        if "email" in changes and await self._is_email_taken(changes["email"], exclude_user_id=user_id):
            self.log.warning(f"Email already in use: {changes['email']}")
            raise _email_in_use()
        
        updated = current.model_copy(update={**changes, "id": user_id, "updated_at": utc_now_iso()})
        await self.users.save(updated)
        self.log.info(f"Updated user {user_id}: {', '.join(sorted(changes)) or 'no fields'}")
        return updated
    
    async def delete_user(self, user_id: str) -> Optional[User]:
        """
        Deactivate a user.
        
        Returns:
            The deactivated user, or None if it does not exist
        """
        current = await self.users.get_by_id(user_id)
        if current is None:
            return None
        
        now = utc_now_iso()
        updated = current.model_copy(update={
            "status": UserStatus.INACTIVE,
            "updated_at": now,
            "deleted_at": now,
        })
        await self.users.save(updated)
        self.log.info(f"Deactivated user {user_id}")
        return updated
