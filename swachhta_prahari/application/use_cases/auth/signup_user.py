# Standard library imports
import logging

# Local application imports
from ....core.config import get_settings
from ....core.security import hash_password, create_token_pair
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ValidationFailedError
from ....infrastructure.external.email_service import EmailService
from ...dto.auth_dto import SignupRequest, AuthResponse, TokenPair
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class SignupUserUseCase:
    """Use case for creating an account, either self-service or by an admin"""

    def __init__(self, user_repository: UserRepository, email_service: EmailService) -> None:
        self.user_repository = user_repository
        self.email_service = email_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """
        Register a new user and issue tokens

        Args:
            request: Signup request with account details

        Returns:
            AuthResponse with the created user and a token pair

        Raises:
            ValidationFailedError: If the email or username is already taken
        """
        if await self.user_repository.find_by_email(request.email) is not None:
            raise ValidationFailedError("User already exists")
        if await self.user_repository.find_by_username(request.username) is not None:
            raise ValidationFailedError("User already exists")

        new_user = User(
            id=None,  # Will be set by repository
            username=request.username,
            email=request.email,
            hashed_password=hash_password(request.password),
            name=request.name,
            role=request.role.value,
            department=request.department or get_settings().default_department,
            is_active=True,
        )
        saved_user = await self.user_repository.save(new_user)

        access_token, refresh_token = create_token_pair(saved_user.id or "", saved_user.role)
        await self.user_repository.set_refresh_token(saved_user.id or "", refresh_token)

        if request.created_by_admin:
            sent = await self.email_service.send_credentials(
                email=saved_user.email,
                name=saved_user.name,
                username=saved_user.username,
                password=request.password,
                role=saved_user.role,
            )
            if not sent:
                logger.error(f"Credentials email could not be sent to {saved_user.email}")

        logger.info(f"New user signed up: {saved_user.username}")
        return AuthResponse(
            user=UserResponse.from_domain(saved_user),
            tokens=TokenPair(access_token=access_token, refresh_token=refresh_token),
        )
