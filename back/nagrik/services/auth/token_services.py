# Standard library imports
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID, uuid4

# Third-party imports
import jwt

# Local application imports
from nagrik.models.auth.user import User
from nagrik.schemas.auth import AccessTokenResponse
from nagrik.settings import settings

ACCESS_TOKEN_TYPE = "access"  # nosec B105
REFRESH_TOKEN_TYPE = "refresh"  # nosec B105


def _create_token(
    user_id: UUID,
    phone_number: str,
    token_type: str,
    expires_delta: timedelta,
) -> tuple[str, str]:
    now = datetime.now(UTC)
    # Unique JWT ID, tracked by the session row
    jti = str(uuid4())

    to_encode = {
        "sub": str(user_id),  # Standard JWT claim for subject
        "phone": phone_number,
        "exp": now + expires_delta,
        "iat": now,
        "token_type": token_type,
        "jti": jti,
    }

    token = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token, jti


def create_access_token(
    user_id: UUID,
    phone_number: str,
    expires_delta: timedelta | None = None,
) -> tuple[str, str]:
    """
    Create a short-lived JWT access token.

    Returns:
        Tuple of (token, jti)
    """
    return _create_token(
        user_id,
        phone_number,
        ACCESS_TOKEN_TYPE,
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def create_refresh_token(
    user_id: UUID,
    phone_number: str,
    expires_delta: timedelta | None = None,
) -> tuple[str, str]:
    """
    Create a long-lived JWT refresh token.

    Returns:
        Tuple of (token, jti)
    """
    return _create_token(
        user_id,
        phone_number,
        REFRESH_TOKEN_TYPE,
        expires_delta or timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES),
    )


def generate_auth_tokens(user: User) -> tuple[AccessTokenResponse, str, str]:
    """
    Generate access and refresh tokens for a user.

    Returns:
        Tuple of (AccessTokenResponse, access_token_jti, refresh_token_jti)
    """
    access_token, access_token_jti = create_access_token(user_id=user.id, phone_number=user.phone_number)
    refresh_token, refresh_token_jti = create_refresh_token(user_id=user.id, phone_number=user.phone_number)

    response = AccessTokenResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        token_type="bearer",  # nosec B106
        user_id=str(user.id),
        role=user.role,
    )
    return response, access_token_jti, refresh_token_jti


def decode_token(token: str) -> dict[str, Any]:
    """Decode and verify a token. Raises ``jwt.PyJWTError`` subclasses on failure."""
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
