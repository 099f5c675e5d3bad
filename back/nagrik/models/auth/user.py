# Standard library imports
from datetime import datetime
import enum
from typing import TYPE_CHECKING

# Third-party imports
from sqlalchemy import Boolean, DateTime, Enum as SQLEnum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from sqlalchemy.sql import func

# Local application imports
from nagrik.models.base import Base
from nagrik.models.mixins.uuid_timestamp import UUIDTimeStampMixin
from nagrik.utils.validators.phone_validator import validate_phone_number

if TYPE_CHECKING:
    # Local application imports
    from nagrik.models.auth.session import Session


class UserRole(str, enum.Enum):
    CITIZEN = "citizen"
    ADMIN = "admin"
    WORKER = "worker"


class User(UUIDTimeStampMixin, Base):
    __tablename__ = "user"

    phone_number: Mapped[str] = mapped_column(
        String,
        index=True,
        unique=True,
        nullable=False,
        comment="E.164 phone number (acts as username)",
    )
    display_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String, nullable=True)

    role: Mapped[UserRole] = mapped_column(
        SQLEnum(UserRole, values_callable=lambda e: [m.value for m in e]),
        default=UserRole.CITIZEN,
        nullable=False,
    )
    is_phone_number_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    sessions: Mapped[list["Session"]] = relationship("Session", back_populates="user", cascade="all, delete")

    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        server_default=func.now(),
        comment="Last login timestamp",
    )

    @validates("phone_number")
    def validate_phone_number(self, key: str, value: str | None) -> str:
        """
        Normalise the phone number to E.164 with the shared validator.
        """
        phone_value = validate_phone_number(value)
        if phone_value is None:
            raise ValueError("Invalid phone number")
        return phone_value

    def __str__(self) -> str:
        return f"User: {self.display_name or '-'} - {self.phone_number}"
