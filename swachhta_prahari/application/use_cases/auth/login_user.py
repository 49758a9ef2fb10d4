# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.security import verify_password, create_token_pair
from ....core.time_utils import utc_now
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.auth_dto import LoginRequest, AuthResponse, TokenPair
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT tokens"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def _find_user(self, identifier: str) -> Optional[User]:
        user = await self.user_repository.find_by_username(identifier)
        if user is None and "@" in identifier:
            user = await self.user_repository.find_by_email(identifier)
        return user

    async def execute(self, request: LoginRequest) -> Optional[AuthResponse]:
        """
        Authenticate by username or email and issue tokens

        Args:
            request: Login request with identifier and password

        Returns:
            AuthResponse if authentication successful, None otherwise
        """
        user = await self._find_user(request.identifier)
        if user is None or not user.is_active:
            logger.warning(f"Failed login attempt for username/email: {request.identifier}")
            return None

        if not verify_password(request.password, user.hashed_password):
            logger.warning(f"Failed login attempt for username/email: {request.identifier}")
            return None

        access_token, refresh_token = create_token_pair(user.id or "", user.role)
        login_time = utc_now()
        await self.user_repository.set_refresh_token(user.id or "", refresh_token, last_login=login_time)
        user.last_login = login_time

        logger.info(f"User logged in: {user.username}")
        return AuthResponse(
            user=UserResponse.from_domain(user),
            tokens=TokenPair(access_token=access_token, refresh_token=refresh_token),
        )
