# Standard library imports
from collections.abc import Iterable
from datetime import datetime

# Local application imports
from nagrik.models.issues.enums import IssueStatus
from nagrik.models.issues.issue import Issue
from nagrik.services.area.types import IssueRecord
from nagrik.utils.datetime_utils import as_utc


def days_unresolved(created_at: datetime, status: IssueStatus, now: datetime) -> int | None:
    """Whole days an open issue has been waiting; None once it is resolved."""
    if status == IssueStatus.RESOLVED:
        return None
    return max(0, (as_utc(now) - as_utc(created_at)).days)


def to_issue_record(issue: Issue, now: datetime) -> IssueRecord:
    created_at = as_utc(issue.created_at)
    return IssueRecord(
        id=str(issue.id),
        category=issue.category,
        location=issue.location,
        status=issue.status,
        created_at=created_at,
        days_unresolved=days_unresolved(created_at, issue.status, now),
        lat=issue.lat,
        lng=issue.lng,
        description=issue.description,
    )


def to_issue_records(issues: Iterable[Issue], now: datetime) -> list[IssueRecord]:
    return [to_issue_record(issue, now) for issue in issues]
