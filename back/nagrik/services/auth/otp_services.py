# Standard library imports
from datetime import UTC, datetime
from typing import TypedDict

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.db_selectors.auth import get_latest_open_otp, retire_open_otps
from nagrik.models.auth.otp import OTP
from nagrik.models.auth.user import User
from nagrik.services.auth.user_services import get_or_create_user
from nagrik.settings import settings

logger = get_contextual_logger(__name__)

LOGIN_PURPOSE = "login"


class OTPVerificationResult(TypedDict, total=False):
    """Result of an OTP check."""

    success: bool
    error: str
    user: User


async def request_otp(db: AsyncSession, phone_number: str) -> tuple[OTP, str]:
    """
    Issue a fresh one-time code for ``phone_number``, creating the citizen account on first contact.

    Earlier unverified codes for the number are retired so only the newest can be used.

    Returns:
        Tuple of (OTP row, plain code). The plain code is never stored.
    """
    await get_or_create_user(db, phone_number)

    await retire_open_otps(db, phone_number, LOGIN_PURPOSE)

    otp, code = OTP.create_otp(phone_number, purpose=LOGIN_PURPOSE)
    db.add(otp)
    await db.commit()

    if settings.UNDER_DEVELOPMENT:
        logger.info(f"OTP for {phone_number}: {code}")
    else:
        # TODO: hand the code to an SMS gateway once one is provisioned
        logger.info(f"OTP issued for {phone_number}")

    return otp, code


async def verify_otp(db: AsyncSession, phone_number: str, code: str) -> OTPVerificationResult:
    """
    Check a one-time code and, on success, mark the phone verified and stamp ``last_login``.
    """
    otp = await get_latest_open_otp(db, phone_number, LOGIN_PURPOSE)
    if otp is None:
        logger.warning(f"OTP verification failed for {phone_number}: no open code")
        return {"success": False, "error": "OTP expired or invalid. Please request a new OTP."}

    if not otp.verify(code):
        # Persist the attempt count
        await db.commit()
        logger.warning(f"OTP verification failed for {phone_number}: wrong or expired code")
        return {"success": False, "error": "Invalid or expired OTP code."}

    user = await get_or_create_user(db, phone_number)
    user.is_phone_number_verified = True
    user.last_login = datetime.now(UTC)
    await db.commit()
    await db.refresh(user)

    logger.info(f"OTP verified for user {user.id}")
    return {"success": True, "user": user}
