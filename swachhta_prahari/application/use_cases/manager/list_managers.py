from typing import List

from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import MANAGER_ROLES
from ...dto.user_dto import UserResponse


class ListManagersUseCase:
    """List every non-admin account, newest first"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        managers = await self.user_repository.find_by_roles([role.value for role in MANAGER_ROLES])
        return [UserResponse.from_domain(manager) for manager in managers]
