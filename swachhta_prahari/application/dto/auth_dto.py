from typing import Optional

from pydantic import EmailStr, Field, model_validator

from ...domain.constants import UserRole, OtpPurpose
from .base import ApiModel
from .user_dto import UserResponse


class SignupRequest(ApiModel):
    """DTO for account creation (self sign-up or by an admin)"""
    name: str = Field(min_length=2, max_length=100)
    department: Optional[str] = Field(default=None, max_length=100)
    role: UserRole
    email: EmailStr
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=256)
    created_by_admin: bool = False


class LoginRequest(ApiModel):
    """DTO for login by username or email"""
    username: Optional[str] = None
    email: Optional[str] = None
    password: str = Field(min_length=1, max_length=256)

    @model_validator(mode="after")
    def _identifier_required(self) -> "LoginRequest":
        if not (self.username or self.email):
            raise ValueError("Username or email is required")
        return self

    @property
    def identifier(self) -> str:
        return (self.username or self.email or "").strip()


class TokenPair(ApiModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class AuthResponse(ApiModel):
    """DTO for authentication response"""
    user: UserResponse
    tokens: TokenPair


class OtpRequest(ApiModel):
    email: EmailStr
    purpose: OtpPurpose = OtpPurpose.FORGOT_PASSWORD


class OtpVerifyRequest(ApiModel):
    email: EmailStr
    otp: str = Field(pattern=r"^\d{6}$")


class UpdatePasswordRequest(ApiModel):
    email: EmailStr
    new_password: str = Field(min_length=6, max_length=256)


class RefreshTokenRequest(ApiModel):
    refresh_token: str = Field(min_length=1)
