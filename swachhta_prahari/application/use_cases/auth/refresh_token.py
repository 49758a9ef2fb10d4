# Local application imports
from ....core.security import decode_refresh_token, create_token_pair
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import AuthenticationError
from ...dto.auth_dto import TokenPair


class RefreshTokenUseCase:
    """Rotate a refresh token: the presented token must be the one on file"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, refresh_token: str) -> TokenPair:
        try:
            payload = decode_refresh_token(refresh_token)
        except ValueError:
            raise AuthenticationError("Invalid refresh token")

        user = await self.user_repository.find_by_id(payload.get("sub") or "")
        if user is None or not user.is_active or user.refresh_token != refresh_token:
            raise AuthenticationError("Invalid refresh token")

        access_token, new_refresh_token = create_token_pair(user.id or "", user.role)
        await self.user_repository.set_refresh_token(user.id or "", new_refresh_token)
        return TokenPair(access_token=access_token, refresh_token=new_refresh_token)
