import logging

from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from .find_manager import find_manager

logger = logging.getLogger(__name__)


class DeleteManagerUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, manager_id: str, admin_id: str) -> None:
        manager = await find_manager(self.user_repository, manager_id)
        if not await self.user_repository.delete(manager.id or ""):
            raise NotFoundError("Manager not found")
        logger.info(f"Manager {manager.username} deleted by admin: {admin_id}")
