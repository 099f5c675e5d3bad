# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy import and_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.models.auth.otp import OTP
from nagrik.models.auth.session import Session
from nagrik.models.auth.user import User


async def get_user_by_id(db: AsyncSession, user_id: UUID) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_phone(db: AsyncSession, phone_number: str) -> User | None:
    result = await db.execute(select(User).where(User.phone_number == phone_number))
    return result.scalar_one_or_none()


async def get_session_by_jti(db: AsyncSession, access_token_jti: str) -> Session | None:
    result = await db.execute(select(Session).where(Session.access_token_jti == access_token_jti))
    return result.scalar_one_or_none()


async def get_latest_open_otp(db: AsyncSession, phone_number: str, purpose: str) -> OTP | None:
    result = await db.execute(
        select(OTP)
        .where(
            and_(
                OTP.phone_number == phone_number,
                OTP.purpose == purpose,
                OTP.is_verified.is_(False),
            )
        )
        .order_by(OTP.created_at.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def retire_open_otps(db: AsyncSession, phone_number: str, purpose: str) -> None:
    """Mark every still-open code for the number as used so only a newer one can verify."""
    await db.execute(
        update(OTP)
        .where(
            and_(
                OTP.phone_number == phone_number,
                OTP.purpose == purpose,
                OTP.is_verified.is_(False),
            )
        )
        .values(is_verified=True)
    )
