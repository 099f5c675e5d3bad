# Local application imports
from nagrik.services.auth.otp_services import request_otp, verify_otp
from nagrik.services.auth.session_services import create_session, invalidate_session
from nagrik.services.auth.token_services import (
    create_access_token,
    create_refresh_token,
    decode_token,
    generate_auth_tokens,
)
from nagrik.services.auth.user_services import get_or_create_user, update_profile

__all__ = [
    "create_access_token",
    "create_refresh_token",
    "create_session",
    "decode_token",
    "generate_auth_tokens",
    "get_or_create_user",
    "invalidate_session",
    "request_otp",
    "update_profile",
    "verify_otp",
]
