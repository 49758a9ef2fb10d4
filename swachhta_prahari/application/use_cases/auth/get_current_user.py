# Standard library imports
from typing import Optional

# Local application imports
from ....core.security import decode_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import AuthenticationError


class GetCurrentUserUseCase:
    """Use case for resolving the active user behind an access token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> User:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            User domain model

        Raises:
            AuthenticationError: If token is invalid or the user is missing or inactive
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise AuthenticationError(f"Invalid or expired token: {str(exception)}")

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid authentication payload: missing user ID")

        user = await self.user_repository.find_by_id(user_id)
        if user is None or not user.is_active:
            raise AuthenticationError("User not found or inactive")
        return user
