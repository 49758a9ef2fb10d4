# Standard library imports
import logging

# Local application imports
from ....core.security import generate_otp
from ....core.time_utils import utc_now
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.otp_repository import OtpRepository
from ....domain.models.one_time_code import OneTimeCode
from ....domain.constants import OtpPurpose
from ....domain.exceptions import NotFoundError, ValidationFailedError, UpstreamServiceError
from ....infrastructure.external.email_service import EmailService
from ...dto.auth_dto import OtpRequest

logger = logging.getLogger(__name__)


class RequestOtpUseCase:
    """
    Issue a 6-digit one-time code by email.

    Login and password-reset codes need an existing account; signup codes
    need the email to be unused.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        otp_repository: OtpRepository,
        email_service: EmailService,
    ) -> None:
        self.user_repository = user_repository
        self.otp_repository = otp_repository
        self.email_service = email_service

    async def execute(self, request: OtpRequest) -> None:
        user = await self.user_repository.find_by_email(request.email)
        if request.purpose in (OtpPurpose.LOGIN, OtpPurpose.FORGOT_PASSWORD) and user is None:
            raise NotFoundError("User not found")
        if request.purpose == OtpPurpose.SIGNUP and user is not None:
            raise ValidationFailedError("User already exists")

        code = OneTimeCode(
            id=None,
            email=request.email,
            otp=generate_otp(),
            purpose=request.purpose.value,
            created_at=utc_now(),
        )
        await self.otp_repository.save(code)

        if not await self.email_service.send_otp(request.email, code.otp, request.purpose.value):
            raise UpstreamServiceError("Failed to send OTP")
        logger.info(f"OTP issued for {request.email} ({request.purpose.value})")
