# Standard library imports
import secrets
import time
from typing import Any, Dict, Tuple

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError, DecodeError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError):
        return False


def _encode(payload: Dict[str, Any], secret: str, expire_minutes: int) -> str:
    settings = get_settings()
    issued_at = int(time.time())
    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": issued_at + (expire_minutes * 60),
        # Distinguishes tokens minted within the same second
        "jti": secrets.token_hex(8),
    }
    return jwt.encode(token_payload, secret, algorithm=settings.jwt_algorithm)


def _decode(token: str, secret: str) -> Dict[str, Any]:
    settings = get_settings()
    try:
        return jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except (InvalidTokenError, DecodeError) as e:
        raise ValueError(f"Invalid token: {str(e)}")


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create an access token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., sub, role)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    return _encode(payload, settings.jwt_secret_key, settings.access_token_expire_minutes)


def create_refresh_token(payload: Dict[str, Any]) -> str:
    """Create a refresh token signed with the refresh secret."""
    settings = get_settings()
    return _encode(payload, settings.jwt_refresh_secret_key, settings.refresh_token_expire_minutes)


def create_token_pair(user_id: str, role: str) -> Tuple[str, str]:
    """
    Create an (access, refresh) token pair for a user

    Args:
        user_id: User ID placed in the standard "sub" claim
        role: User role, carried so clients can route without a lookup

    Returns:
        Tuple of access token and refresh token
    """
    claims = {"sub": user_id, "role": role}
    return create_jwt_token(claims), create_refresh_token(claims)


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate an access token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is invalid, expired or cannot be decoded
    """
    return _decode(token, get_settings().jwt_secret_key)


def decode_refresh_token(token: str) -> Dict[str, Any]:
    """Decode and validate a refresh token. Raises ValueError when invalid."""
    return _decode(token, get_settings().jwt_refresh_secret_key)


def generate_otp() -> str:
    """Generate a 6-digit one-time code."""
    return str(100000 + secrets.randbelow(900000))
