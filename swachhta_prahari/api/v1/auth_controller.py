# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import (
    SignupRequest,
    LoginRequest,
    OtpRequest,
    OtpVerifyRequest,
    UpdatePasswordRequest,
    RefreshTokenRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth import (
    SignupUserUseCase,
    LoginUserUseCase,
    RefreshTokenUseCase,
    LogoutUserUseCase,
    RequestOtpUseCase,
    VerifyOtpUseCase,
    UpdatePasswordUseCase,
)
from ...domain.exceptions import PrahariError
from ...di.container import get_container
from .dependencies import get_current_user
from .responses import envelope, http_error


router = APIRouter(tags=["authentication"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest) -> dict:
    """
    Create an account and issue tokens

    Args:
        request: Signup request

    Returns:
        Envelope with the created user and a token pair
    """
    container = get_container()
    signup_use_case = container.get(SignupUserUseCase)

    try:
        result = await signup_use_case.execute(request)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(result, message="User registered successfully")


@router.post("/login")
async def login(request: LoginRequest) -> dict:
    """
    Authenticate by username or email

    Returns:
        Envelope with the user and a token pair
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    result = await login_use_case.execute(request)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )
    return envelope(result, message="Login successful")


@router.post("/refresh")
async def refresh(request: RefreshTokenRequest) -> dict:
    container = get_container()
    refresh_use_case = container.get(RefreshTokenUseCase)

    try:
        tokens = await refresh_use_case.execute(request.refresh_token)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(tokens)


@router.post("/logout")
async def logout(current_user: UserResponse = Depends(get_current_user)) -> dict:
    container = get_container()
    await container.get(LogoutUserUseCase).execute(current_user.id)
    return envelope(message="Logged out successfully")


@router.get("/me")
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> dict:
    """
    Get current authenticated user information

    Args:
        current_user: Current authenticated user (from dependency)
    """
    return envelope({"user": current_user})


@router.post("/get-otp")
async def get_otp(request: OtpRequest) -> dict:
    """Send a one-time code for signup, login or password reset"""
    container = get_container()
    request_otp_use_case = container.get(RequestOtpUseCase)

    try:
        await request_otp_use_case.execute(request)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(message="OTP sent successfully")


@router.post("/verify-otp")
async def verify_otp(request: OtpVerifyRequest) -> dict:
    container = get_container()
    verify_otp_use_case = container.get(VerifyOtpUseCase)

    try:
        await verify_otp_use_case.execute(request)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(message="OTP verified successfully")


@router.post("/updatepassword")
async def update_password(request: UpdatePasswordRequest) -> dict:
    container = get_container()
    update_password_use_case = container.get(UpdatePasswordUseCase)

    try:
        await update_password_use_case.execute(request)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(message="Password updated successfully")
