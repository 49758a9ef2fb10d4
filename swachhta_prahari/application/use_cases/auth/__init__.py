from .signup_user import SignupUserUseCase
from .login_user import LoginUserUseCase
from .get_current_user import GetCurrentUserUseCase
from .refresh_token import RefreshTokenUseCase
from .logout_user import LogoutUserUseCase
from .request_otp import RequestOtpUseCase
from .verify_otp import VerifyOtpUseCase
from .update_password import UpdatePasswordUseCase

__all__ = [
    "SignupUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "RefreshTokenUseCase",
    "LogoutUserUseCase",
    "RequestOtpUseCase",
    "VerifyOtpUseCase",
    "UpdatePasswordUseCase",
]
