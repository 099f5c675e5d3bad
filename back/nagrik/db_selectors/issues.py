# Standard library imports
from collections.abc import Sequence
from uuid import UUID

# Third-party imports
from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

# Local application imports
from nagrik.models.issues.area_stats import AreaStats
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.models.issues.issue import Issue


async def get_issue_by_id(
    db: AsyncSession, issue_id: UUID, with_updates: bool = False, for_update: bool = False
) -> Issue | None:
    query = select(Issue).where(Issue.id == issue_id)
    if with_updates:
        # Reload the log even if the issue is already in the session
        query = query.options(selectinload(Issue.updates)).execution_options(populate_existing=True)
    if for_update:
        # Writers moving the status hold the row until commit
        query = query.with_for_update().execution_options(populate_existing=True)
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def list_issues(
    db: AsyncSession,
    reporter_id: UUID | None = None,
    status: IssueStatus | None = None,
    category: IssueCategory | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> Sequence[Issue]:
    """Issues newest first, optionally filtered."""
    filters = []
    if reporter_id is not None:
        filters.append(Issue.reporter_id == reporter_id)
    if status is not None:
        filters.append(Issue.status == status)
    if category is not None:
        filters.append(Issue.category == category)

    query = select(Issue)
    if filters:
        query = query.where(and_(*filters))
    query = query.order_by(Issue.created_at.desc()).offset(offset)
    if limit is not None:
        query = query.limit(limit)

    result = await db.execute(query)
    return result.scalars().all()


async def count_issues(
    db: AsyncSession,
    reporter_id: UUID | None = None,
    status: IssueStatus | None = None,
    category: IssueCategory | None = None,
) -> int:
    filters = []
    if reporter_id is not None:
        filters.append(Issue.reporter_id == reporter_id)
    if status is not None:
        filters.append(Issue.status == status)
    if category is not None:
        filters.append(Issue.category == category)

    query = select(func.count()).select_from(Issue)
    if filters:
        query = query.where(and_(*filters))
    result = await db.execute(query)
    return result.scalar() or 0


async def list_area_stats(db: AsyncSession) -> Sequence[AreaStats]:
    # Counters change through SQL updates; always reload the rows
    query = select(AreaStats).order_by(AreaStats.total_issues.desc(), AreaStats.location)
    result = await db.execute(query.execution_options(populate_existing=True))
    return result.scalars().all()


async def sum_area_stats(db: AsyncSession) -> dict[str, int]:
    result = await db.execute(
        select(
            func.coalesce(func.sum(AreaStats.total_issues), 0),
            func.coalesce(func.sum(AreaStats.pending_issues), 0),
            func.coalesce(func.sum(AreaStats.in_progress_issues), 0),
            func.coalesce(func.sum(AreaStats.resolved_issues), 0),
        )
    )
    total, pending, in_progress, resolved = result.one()
    return {
        "total": int(total),
        "pending": int(pending),
        "in_progress": int(in_progress),
        "resolved": int(resolved),
    }
