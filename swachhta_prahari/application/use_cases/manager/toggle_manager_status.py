import logging
from dataclasses import replace

from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from .find_manager import find_manager

logger = logging.getLogger(__name__)


class ToggleManagerStatusUseCase:
    """Flip a manager between active and inactive"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, manager_id: str, admin_id: str) -> UserResponse:
        manager = await find_manager(self.user_repository, manager_id)
        is_active = not manager.is_active
        # Deactivated accounts lose their refresh token
        refresh_token = manager.refresh_token if is_active else None
        saved = await self.user_repository.save(
            replace(manager, is_active=is_active, refresh_token=refresh_token)
        )
        logger.info(
            f"Manager {saved.username} {'activated' if saved.is_active else 'deactivated'} by admin: {admin_id}"
        )
        return UserResponse.from_domain(saved)
