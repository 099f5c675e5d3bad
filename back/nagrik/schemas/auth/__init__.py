# Local application imports
from nagrik.schemas.auth.auth_schemas import (
    AccessTokenResponse,
    OTPRequest,
    OTPSentResponse,
    OTPVerifyRequest,
    UserProfileUpdate,
    UserResponse,
)

__all__ = [
    "AccessTokenResponse",
    "OTPRequest",
    "OTPSentResponse",
    "OTPVerifyRequest",
    "UserProfileUpdate",
    "UserResponse",
]
