from typing import TYPE_CHECKING
from ...domain.repositories import UserRepository, OtpRepository
from ...infrastructure.external import EmailService
from ...application.use_cases.auth import (
    SignupUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    RefreshTokenUseCase,
    LogoutUserUseCase,
    RequestOtpUseCase,
    VerifyOtpUseCase,
    UpdatePasswordUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            SignupUserUseCase,
            lambda: SignupUserUseCase(
                user_repository=container.get(UserRepository),
                email_service=container.get(EmailService),
            )
        )
        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            GetCurrentUserUseCase,
            lambda: GetCurrentUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            RefreshTokenUseCase,
            lambda: RefreshTokenUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            LogoutUserUseCase,
            lambda: LogoutUserUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            RequestOtpUseCase,
            lambda: RequestOtpUseCase(
                user_repository=container.get(UserRepository),
                otp_repository=container.get(OtpRepository),
                email_service=container.get(EmailService),
            )
        )
        container.register_factory(
            VerifyOtpUseCase,
            lambda: VerifyOtpUseCase(otp_repository=container.get(OtpRepository))
        )
        container.register_factory(
            UpdatePasswordUseCase,
            lambda: UpdatePasswordUseCase(
                user_repository=container.get(UserRepository),
                otp_repository=container.get(OtpRepository),
            )
        )
