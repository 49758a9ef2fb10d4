from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from ...domain.constants import UserRole
from ...domain.models.user import User
from .base import ApiModel


class UserResponse(ApiModel):
    """DTO for user response"""
    id: str
    name: str
    username: str
    email: str
    role: str
    department: str
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            username=user.username,
            email=user.email,
            role=user.role,
            department=user.department,
            is_active=user.is_active,
            last_login=user.last_login,
            created_at=user.created_at,
        )


class ManagerUpdateRequest(ApiModel):
    """Partial update of a manager account; password is re-hashed when given"""
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    username: Optional[str] = Field(default=None, min_length=3, max_length=50)
    department: Optional[str] = Field(default=None, max_length=100)
    role: Optional[UserRole] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=256)
