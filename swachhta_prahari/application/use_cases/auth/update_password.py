import logging

from ....core.security import hash_password
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.otp_repository import OtpRepository
from ....domain.exceptions import NotFoundError
from ...dto.auth_dto import UpdatePasswordRequest

logger = logging.getLogger(__name__)


class UpdatePasswordUseCase:
    """Set a new password (after OTP verification) and drop any pending codes"""

    def __init__(self, user_repository: UserRepository, otp_repository: OtpRepository) -> None:
        self.user_repository = user_repository
        self.otp_repository = otp_repository

    async def execute(self, request: UpdatePasswordRequest) -> None:
        updated = await self.user_repository.update_password(
            request.email, hash_password(request.new_password)
        )
        if not updated:
            raise NotFoundError("User not found")
        await self.otp_repository.delete_for_email(request.email)
        logger.info(f"Password updated for {request.email}")
