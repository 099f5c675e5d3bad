# Standard library imports
from datetime import UTC, datetime, timedelta
import secrets

# Third-party imports
from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from nagrik.models.base import Base
from nagrik.models.mixins.uuid_timestamp import UUIDTimeStampMixin
from nagrik.settings import settings
from nagrik.utils.datetime_utils import as_utc
from nagrik.utils.password_utils import get_password_hash, verify_password


class OTP(Base, UUIDTimeStampMixin):
    __tablename__ = "otp"

    phone_number: Mapped[str] = mapped_column(String, nullable=False, index=True)
    code_hash: Mapped[str] = mapped_column(String, nullable=False)
    purpose: Mapped[str] = mapped_column(String(50), nullable=False, default="login")
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    attempts: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @classmethod
    def generate_code(cls) -> str:
        """Generate a 6-digit code using secure random"""
        return "".join(str(secrets.randbelow(10)) for _ in range(6))

    @classmethod
    def create_otp(cls, phone_number: str, purpose: str = "login") -> tuple["OTP", str]:
        """Create a new OTP; returns the row and the plain code (only the hash is stored)"""
        code = cls.generate_code()
        otp = cls(
            phone_number=phone_number,
            code_hash=get_password_hash(code),
            purpose=purpose,
            attempts=0,
            is_verified=False,
            expires_at=datetime.now(UTC) + timedelta(minutes=settings.OTP_EXPIRE_MINUTES),
        )
        return otp, code

    def is_expired(self) -> bool:
        return datetime.now(UTC) > as_utc(self.expires_at)

    def verify(self, code: str) -> bool:
        """Check the code, counting the attempt. Expired, used or exhausted codes never verify."""
        if self.is_expired() or self.is_verified:
            return False
        if self.attempts >= settings.OTP_MAX_ATTEMPTS:
            return False

        self.attempts += 1

        if verify_password(code, self.code_hash):
            self.is_verified = True
            self.verified_at = datetime.now(UTC)
            return True

        return False
