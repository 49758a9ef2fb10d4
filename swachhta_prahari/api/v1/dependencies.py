# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.config import get_settings
from ...core.rate_limit import FixedWindowRateLimiter
from ...domain.exceptions import AuthenticationError
from ...di.container import get_container


security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Args:
        credentials: HTTP Bearer token credentials

    Returns:
        UserResponse with user information

    Raises:
        HTTPException: If token is missing, invalid or the user is inactive
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided."
        )
    token: str = credentials.credentials

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        user = await get_current_user_use_case.execute(token)
        return UserResponse.from_domain(user)
    except AuthenticationError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exception.message
        )


async def verify_webhook_secret(x_webhook_secret: Optional[str] = Header(default=None)) -> None:
    """Require X-Webhook-Secret when a webhook secret is configured"""
    expected = get_settings().webhook_secret
    if expected and x_webhook_secret != expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook secret"
        )


_webhook_limiter: Optional[FixedWindowRateLimiter] = None


def get_webhook_limiter() -> FixedWindowRateLimiter:
    global _webhook_limiter
    if _webhook_limiter is None:
        settings = get_settings()
        _webhook_limiter = FixedWindowRateLimiter(
            max_requests=settings.webhook_rate_limit_max,
            window_seconds=settings.rate_limit_window_minutes * 60,
        )
    return _webhook_limiter
