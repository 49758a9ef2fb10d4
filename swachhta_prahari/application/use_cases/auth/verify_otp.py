from ....domain.repositories.otp_repository import OtpRepository
from ....domain.exceptions import ValidationFailedError
from ...dto.auth_dto import OtpVerifyRequest


class VerifyOtpUseCase:
    """Check a one-time code; a matching code is consumed"""

    def __init__(self, otp_repository: OtpRepository) -> None:
        self.otp_repository = otp_repository

    async def execute(self, request: OtpVerifyRequest) -> None:
        record = await self.otp_repository.find(request.email, request.otp)
        if record is None:
            raise ValidationFailedError("OTP expired or invalid")
        await self.otp_repository.delete_for_email(request.email)
