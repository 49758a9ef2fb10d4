import logging

from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class LogoutUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> None:
        await self.user_repository.set_refresh_token(user_id, None)
        logger.info(f"User logged out: {user_id}")
