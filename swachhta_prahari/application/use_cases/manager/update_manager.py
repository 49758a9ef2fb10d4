# Standard library imports
import logging
from dataclasses import replace

# Local application imports
from ....core.security import hash_password
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import ValidationFailedError
from ...dto.user_dto import ManagerUpdateRequest, UserResponse
from .find_manager import find_manager

logger = logging.getLogger(__name__)


class UpdateManagerUseCase:
    """Partial update of a manager account; a new password is re-hashed"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, manager_id: str, request: ManagerUpdateRequest, admin_id: str) -> UserResponse:
        manager = await find_manager(self.user_repository, manager_id)

        changes = {}
        if request.name is not None:
            changes["name"] = request.name.strip()
        if request.email is not None and request.email != manager.email:
            existing = await self.user_repository.find_by_email(request.email)
            if existing is not None and existing.id != manager.id:
                raise ValidationFailedError("Email already in use")
            changes["email"] = request.email
        if request.username is not None and request.username != manager.username:
            existing = await self.user_repository.find_by_username(request.username)
            if existing is not None and existing.id != manager.id:
                raise ValidationFailedError("Username already in use")
            changes["username"] = request.username
        if request.department is not None:
            changes["department"] = request.department
        if request.role is not None:
            changes["role"] = request.role.value
        if request.password and request.password.strip():
            changes["hashed_password"] = hash_password(request.password)

        try:
            updated = replace(manager, **changes)
        except ValueError as e:
            raise ValidationFailedError(str(e))

        saved = await self.user_repository.save(updated)
        logger.info(f"Manager {saved.username} updated by admin: {admin_id}")
        return UserResponse.from_domain(saved)
