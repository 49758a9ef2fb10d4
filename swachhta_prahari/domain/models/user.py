from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..constants.enums import UserRole


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    email: str
    hashed_password: str
    name: str
    role: str
    department: str = "UPSIDA"
    is_active: bool = True
    last_login: Optional[datetime] = None
    refresh_token: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.name or len(self.name.strip()) < 2:
            raise ValueError("Name must be at least 2 characters")
        if not self.username or len(self.username.strip()) < 3:
            raise ValueError("Username must be at least 3 characters")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if self.role not in {r.value for r in UserRole}:
            raise ValueError(f"Invalid role: {self.role}")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
