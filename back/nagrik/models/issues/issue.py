# Standard library imports
import uuid

# Third-party imports
from sqlalchemy import Enum as SQLEnum, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

# Local application imports
from nagrik.models.base import Base
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.models.mixins.uuid_timestamp import UUIDTimeStampMixin


def _enum_values(enum_cls: type) -> list[str]:
    return [member.value for member in enum_cls]


class Issue(Base, UUIDTimeStampMixin):
    __tablename__ = "issues"

    # Issue details
    category: Mapped[IssueCategory] = mapped_column(
        SQLEnum(IssueCategory, values_callable=_enum_values), nullable=False, index=True
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[IssueStatus] = mapped_column(
        SQLEnum(IssueStatus, values_callable=_enum_values), default=IssueStatus.PENDING, nullable=False, index=True
    )
    affected_count: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    photo_url: Mapped[str | None] = mapped_column(String, nullable=True)

    # Free-text area label, stored exactly as typed
    location: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    lng: Mapped[float | None] = mapped_column(Float, nullable=True)

    reporter_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), ForeignKey("user.id"), nullable=False, index=True)

    updates: Mapped[list["IssueUpdate"]] = relationship(
        "IssueUpdate",
        back_populates="issue",
        cascade="all, delete-orphan",
        order_by="IssueUpdate.created_at",
    )


class IssueUpdate(Base, UUIDTimeStampMixin):
    """One entry of an issue's append-only status log."""

    __tablename__ = "issue_updates"

    issue_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), ForeignKey("issues.id"), nullable=False, index=True)
    status: Mapped[IssueStatus] = mapped_column(SQLEnum(IssueStatus, values_callable=_enum_values), nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[uuid.UUID | None] = mapped_column(Uuid(as_uuid=True), ForeignKey("user.id"), nullable=True)

    issue: Mapped[Issue] = relationship("Issue", back_populates="updates")
