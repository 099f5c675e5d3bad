# Third-party imports
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from nagrik.models.base import Base
from nagrik.models.issues.enums import IssueStatus
from nagrik.models.mixins.uuid_timestamp import UUIDTimeStampMixin

STATUS_COUNTER_COLUMNS: dict[IssueStatus, str] = {
    IssueStatus.PENDING: "pending_issues",
    IssueStatus.IN_PROGRESS: "in_progress_issues",
    IssueStatus.RESOLVED: "resolved_issues",
}


class AreaStats(Base, UUIDTimeStampMixin):
    """Denormalized per-area counters, kept in step with issue writes."""

    __tablename__ = "area_stats"

    # Same raw string as Issue.location
    location: Mapped[str] = mapped_column(String(200), nullable=False, unique=True, index=True)

    total_issues: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    pending_issues: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    in_progress_issues: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    resolved_issues: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    @staticmethod
    def new_issue_deltas(status: IssueStatus) -> dict[str, int]:
        """Counter changes for an issue entering the area in ``status``."""
        return {"total_issues": 1, STATUS_COUNTER_COLUMNS[status]: 1}

    @staticmethod
    def transition_deltas(old: IssueStatus, new: IssueStatus) -> dict[str, int]:
        """Counter changes for an issue moving between statuses; empty when unchanged."""
        if old == new:
            return {}
        return {STATUS_COUNTER_COLUMNS[old]: -1, STATUS_COUNTER_COLUMNS[new]: 1}
