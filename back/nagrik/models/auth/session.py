# Standard library imports
from datetime import UTC, datetime
from typing import TYPE_CHECKING
import uuid

# Third-party imports
from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

# Local application imports
from nagrik.models.base import Base
from nagrik.models.mixins.uuid_timestamp import UUIDTimeStampMixin
from nagrik.utils.datetime_utils import as_utc

if TYPE_CHECKING:  # pragma: no cover
    # Local application imports
    from nagrik.models.auth.user import User


class Session(UUIDTimeStampMixin, Base):
    __tablename__ = "session"

    __table_args__ = (
        Index(
            "idx_session_valid_by_user",
            "user_id",
            postgresql_where=text("is_active = true AND invalidated_at IS NULL"),
        ),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )

    access_token_jti: Mapped[str] = mapped_column(
        String,
        unique=True,
        nullable=False,
        comment="JWT ID for the access token",
    )

    refresh_token_jti: Mapped[str] = mapped_column(
        String,
        unique=True,
        nullable=False,
        comment="JWT ID for the refresh token",
    )

    device_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(String, nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    invalidated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    invalidation_reason: Mapped[str | None] = mapped_column(String, nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="sessions")

    @property
    def is_expired(self) -> bool:
        return datetime.now(UTC) > as_utc(self.expires_at)

    @property
    def is_valid(self) -> bool:
        return self.is_active and not self.is_expired and self.invalidated_at is None

    def invalidate(self, reason: str = "manual_logout") -> None:
        self.is_active = False
        self.invalidated_at = datetime.now(UTC)
        self.invalidation_reason = reason

    def __str__(self) -> str:
        return f"Session: {self.id} · User: {self.user_id}"
