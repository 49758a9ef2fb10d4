from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import NotFoundError


async def find_manager(user_repository: UserRepository, manager_id: str) -> User:
    """Load a manager account; admin accounts are not managed through these endpoints"""
    user = await user_repository.find_by_id(manager_id)
    if user is None or user.is_admin:
        raise NotFoundError("Manager not found")
    return user
