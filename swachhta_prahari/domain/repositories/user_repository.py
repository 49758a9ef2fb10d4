from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List, Sequence
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_roles(self, roles: Sequence[str]) -> List[User]:
        """Find users holding any of the given roles, newest first"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete user; returns False when nothing was deleted"""
        pass

    @abstractmethod
    async def set_refresh_token(
        self, user_id: str, refresh_token: Optional[str], last_login: Optional[datetime] = None
    ) -> None:
        """Store (or clear) the current refresh token, optionally recording a login"""
        pass

    @abstractmethod
    async def update_password(self, email: str, hashed_password: str) -> bool:
        """Replace the password hash for the user with this email"""
        pass
