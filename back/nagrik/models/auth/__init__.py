# Local application imports
from nagrik.models.auth.otp import OTP
from nagrik.models.auth.session import Session
from nagrik.models.auth.user import User, UserRole

__all__ = ["User", "UserRole", "Session", "OTP"]
