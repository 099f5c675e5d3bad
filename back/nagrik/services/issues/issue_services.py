# Standard library imports
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

# Third-party imports
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.db_selectors.issues import count_issues, get_issue_by_id, list_issues, sum_area_stats
from nagrik.models.auth.user import User
from nagrik.models.issues.area_stats import AreaStats
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.models.issues.issue import Issue, IssueUpdate
from nagrik.schemas.issues import IssueCreate, IssueDetailResponse, IssueResponse, IssueUpdateResponse
from nagrik.services.area.records import days_unresolved, to_issue_records
from nagrik.services.area.types import IssueRecord
from nagrik.services.geocoding import Geocoder, display_address
from nagrik.services.issues.area_counters import apply_area_stats_deltas, ensure_area_stats
from nagrik.settings import settings
from nagrik.utils.cache_utils import (
    CacheKeys,
    delete_cached_keys,
    dependent_cache_keys,
    get_cached_data,
    set_cached_data,
)
from nagrik.utils.datetime_utils import as_utc
from nagrik.utils.geo_utils import is_valid_coordinates

logger = get_contextual_logger(__name__)

REPORTED_COMMENT = "Issue reported"


@dataclass(frozen=True)
class IssueWriteResult:
    """What a write touched, and the cached views that depend on it."""

    issue: Issue
    issue_id: UUID
    reporter_id: UUID

    @property
    def dependent_cache_keys(self) -> list[str]:
        return dependent_cache_keys(self.issue_id, self.reporter_id)


async def _refreshed(result: IssueWriteResult) -> IssueWriteResult:
    await delete_cached_keys(result.dependent_cache_keys)
    return result


def issue_to_response(issue: Issue, now: datetime) -> IssueResponse:
    response = IssueResponse.model_validate(issue)
    response.address = display_address(issue.lat, issue.lng, issue.address)
    response.days_unresolved = days_unresolved(issue.created_at, issue.status, now)
    return response


async def report_issue(db: AsyncSession, reporter: User, data: IssueCreate, geocoder: Geocoder) -> IssueWriteResult:
    """
    Save a new report in the Pending state with its first status-log entry.

    Coordinates are stored only when geocoding the location succeeded; a
    failed lookup still saves the issue, just without a map position.
    """
    log = get_contextual_logger(__name__, user_id=reporter.id)

    issue = Issue(
        category=data.category,
        description=data.description,
        location=data.location,
        affected_count=data.affected_count,
        photo_url=data.photo_url,
        status=IssueStatus.PENDING,
        reporter_id=reporter.id,
    )

    geocoded = await geocoder.geocode(data.location)
    if geocoded.success and is_valid_coordinates(geocoded.lat, geocoded.lng):
        issue.lat = geocoded.lat
        issue.lng = geocoded.lng
        issue.address = geocoded.address
    else:
        log.warning(f"Saving issue without coordinates for location {data.location!r}")

    issue.updates.append(IssueUpdate(status=IssueStatus.PENDING, comment=REPORTED_COMMENT, author_id=reporter.id))
    db.add(issue)

    await ensure_area_stats(db, data.location)
    await apply_area_stats_deltas(db, data.location, AreaStats.new_issue_deltas(IssueStatus.PENDING))

    await db.commit()
    await db.refresh(issue)

    log.info(f"Issue {issue.id} reported in {issue.location!r} ({issue.category.value})")
    return await _refreshed(IssueWriteResult(issue=issue, issue_id=issue.id, reporter_id=issue.reporter_id))


async def add_status_update(
    db: AsyncSession,
    issue_id: UUID,
    status: IssueStatus,
    comment: str | None,
    author: User,
) -> IssueWriteResult:
    """
    Append a status-log entry and move the issue (and its area counters) to ``status``.

    Raises a 404 when the issue does not exist.
    """
    issue = await get_issue_by_id(db, issue_id, for_update=True)
    if issue is None:
        raise HTTPException(status_code=404, detail="Issue not found")

    previous = issue.status

    db.add(IssueUpdate(issue_id=issue.id, status=status, comment=comment, author_id=author.id))
    issue.status = status

    if await ensure_area_stats(db, issue.location):
        # Counters row was missing for this area; start it from the new status
        deltas = AreaStats.new_issue_deltas(status)
    else:
        deltas = AreaStats.transition_deltas(previous, status)
    await apply_area_stats_deltas(db, issue.location, deltas)

    await db.commit()
    await db.refresh(issue)

    logger.info(f"Issue {issue.id} moved {previous.value} -> {status.value} by {author.id}")
    return await _refreshed(IssueWriteResult(issue=issue, issue_id=issue.id, reporter_id=issue.reporter_id))


def _snapshot(record: IssueRecord) -> dict[str, Any]:
    # days_unresolved is left out; it depends on when the snapshot is read
    return {
        "id": record.id,
        "category": record.category.value,
        "location": record.location,
        "status": record.status.value,
        "created_at": record.created_at.isoformat(),
        "lat": record.lat,
        "lng": record.lng,
        "description": record.description,
    }


def _record_from_snapshot(row: dict[str, Any], now: datetime) -> IssueRecord:
    created_at = as_utc(datetime.fromisoformat(row["created_at"]))
    status = IssueStatus(row["status"])
    return IssueRecord(
        id=row["id"],
        category=IssueCategory(row["category"]),
        location=row["location"],
        status=status,
        created_at=created_at,
        days_unresolved=days_unresolved(created_at, status, now),
        lat=row.get("lat"),
        lng=row.get("lng"),
        description=row.get("description") or "",
    )


async def load_issue_records(db: AsyncSession, now: datetime | None = None) -> list[IssueRecord]:
    """
    Every issue, newest first, as aggregation records.

    The raw rows are cached; ``days_unresolved`` is always derived against ``now``.
    """
    now = now or datetime.now(UTC)
    snapshot = await get_cached_data(CacheKeys.all_issues())
    if snapshot is not None:
        return [_record_from_snapshot(row, now) for row in snapshot]

    records = to_issue_records(await list_issues(db), now)
    snapshot = [_snapshot(record) for record in records]
    await set_cached_data(CacheKeys.all_issues(), snapshot, settings.CACHE_TTL_SECONDS)
    return records


async def get_issue_stats(db: AsyncSession) -> dict[str, int]:
    stats = await get_cached_data(CacheKeys.issue_stats())
    if stats is None:
        stats = await sum_area_stats(db)
        await set_cached_data(CacheKeys.issue_stats(), stats, settings.ANALYTICS_CACHE_TTL_SECONDS)
    return stats


def _cacheable(response: IssueResponse) -> dict[str, Any]:
    # Ages are derived per read, never stored
    return response.model_dump(mode="json", exclude={"days_unresolved"})


def _from_cache(model: type[IssueResponse], payload: dict[str, Any], now: datetime) -> IssueResponse:
    response = model.model_validate(payload)
    response.days_unresolved = days_unresolved(response.created_at, response.status, now)
    return response


async def list_user_issues(db: AsyncSession, user: User, now: datetime | None = None) -> list[IssueResponse]:
    now = now or datetime.now(UTC)
    cache_key = CacheKeys.user_issues(user.id)
    cached = await get_cached_data(cache_key)
    if cached is not None:
        return [_from_cache(IssueResponse, item, now) for item in cached]

    responses = [issue_to_response(issue, now) for issue in await list_issues(db, reporter_id=user.id)]
    await set_cached_data(cache_key, [_cacheable(r) for r in responses])
    return responses


async def get_issue(db: AsyncSession, issue_id: UUID, now: datetime | None = None) -> IssueDetailResponse | None:
    now = now or datetime.now(UTC)
    cache_key = CacheKeys.issue(issue_id)
    cached = await get_cached_data(cache_key)
    if cached is not None:
        return _from_cache(IssueDetailResponse, cached, now)

    issue = await get_issue_by_id(db, issue_id, with_updates=True)
    if issue is None:
        return None

    detail = IssueDetailResponse(
        **issue_to_response(issue, now).model_dump(),
        updates=[IssueUpdateResponse.model_validate(update) for update in issue.updates],
    )
    await set_cached_data(cache_key, _cacheable(detail))
    return detail


async def list_all_issues(
    db: AsyncSession,
    status: IssueStatus | None = None,
    category: IssueCategory | None = None,
    limit: int = 50,
    offset: int = 0,
    now: datetime | None = None,
) -> tuple[list[IssueResponse], int]:
    """One page of the public issue list, newest first, with the unpaged total."""
    now = now or datetime.now(UTC)
    issues = await list_issues(db, status=status, category=category, limit=limit, offset=offset)
    total = await count_issues(db, status=status, category=category)
    return [issue_to_response(issue, now) for issue in issues], total
