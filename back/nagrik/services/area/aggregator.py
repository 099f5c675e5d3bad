"""
Area aggregation for the public dashboards.

Every function here is a pure transform over an in-memory sequence of
``IssueRecord``: nothing is mutated, nothing is cached, and each call builds
fresh output containers, so the functions are safe to call from any number of
concurrent requests.

Location strings are used exactly as reported. Two spellings of the same
place ("Market Street" / "market street") are separate buckets.
"""

# Standard library imports
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

# Local application imports
from nagrik.models.issues.enums import IssueCategory
from nagrik.services.area.types import (
    AreaOverview,
    AreaSeverity,
    AreaTile,
    Coordinates,
    IssueRecord,
    SeverityTier,
    TimeWindow,
)
from nagrik.utils.datetime_utils import as_utc
from nagrik.utils.geo_utils import is_valid_coordinates

# Tiles for these areas are always rendered, even with no reports yet
PRESEEDED_AREAS: tuple[str, ...] = (
    "MG Road, Block A",
    "Sector 4 Park",
    "Market Street",
    "Central Mall Area",
)

WINDOW_SPANS: dict[TimeWindow, timedelta] = {
    TimeWindow.LAST_24_HOURS: timedelta(hours=24),
    TimeWindow.LAST_7_DAYS: timedelta(days=7),
    TimeWindow.LAST_30_DAYS: timedelta(days=30),
}

CRITICAL_AFTER_DAYS = 5  # strictly greater
WARNING_FROM_DAYS = 3  # inclusive


def resolve_window(window: TimeWindow | str | None) -> TimeWindow:
    """Map a window tag to a ``TimeWindow``; anything unrecognised means ``ALL``."""
    if isinstance(window, TimeWindow):
        return window
    try:
        return TimeWindow(window)
    except ValueError:
        return TimeWindow.ALL


def filter_by_window(
    issues: Sequence[IssueRecord],
    window: TimeWindow | str | None,
    now: datetime,
) -> list[IssueRecord]:
    """
    Keep the issues created at or after ``now - window``, in input order.

    ``all`` and unknown tags return every issue.
    """
    span = WINDOW_SPANS.get(resolve_window(window))
    if span is None:
        return list(issues)

    cutoff = as_utc(now) - span
    return [issue for issue in issues if as_utc(issue.created_at) >= cutoff]


def count_by_category(issues: Iterable[IssueRecord]) -> dict[IssueCategory, int]:
    counts: dict[IssueCategory, int] = {}
    for issue in issues:
        counts[issue.category] = counts.get(issue.category, 0) + 1
    return counts


def count_by_location(issues: Iterable[IssueRecord]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for issue in issues:
        counts[issue.location] = counts.get(issue.location, 0) + 1
    return counts


def area_category_matrix(issues: Iterable[IssueRecord]) -> dict[str, dict[IssueCategory, int]]:
    """Location -> category -> count. Categories with no issues in an area are left out."""
    matrix: dict[str, dict[IssueCategory, int]] = {}
    for issue in issues:
        row = matrix.setdefault(issue.location, {})
        row[issue.category] = row.get(issue.category, 0) + 1
    return matrix


def severity_by_area(
    issues: Iterable[IssueRecord],
    preseeded_areas: Iterable[str] = PRESEEDED_AREAS,
) -> dict[str, AreaSeverity]:
    """
    Unresolved count and oldest unresolved age per area.

    Resolved issues only register their area as a key; they never add to
    ``count`` or ``max_days_unresolved``. Pre-seeded areas are always present,
    after the areas seen in the input.
    """
    counts: dict[str, int] = {}
    max_days: dict[str, int] = {}

    for issue in issues:
        counts.setdefault(issue.location, 0)
        max_days.setdefault(issue.location, 0)
        if issue.is_resolved:
            continue
        counts[issue.location] += 1
        max_days[issue.location] = max(max_days[issue.location], issue.days_unresolved or 0)

    for area in preseeded_areas:
        counts.setdefault(area, 0)
        max_days.setdefault(area, 0)

    return {area: AreaSeverity(count=counts[area], max_days_unresolved=max_days[area]) for area in counts}


def severity_tier(max_days_unresolved: int | None) -> SeverityTier:
    days = max_days_unresolved or 0
    if days > CRITICAL_AFTER_DAYS:
        return SeverityTier.CRITICAL
    if days >= WARNING_FROM_DAYS:
        return SeverityTier.WARNING
    return SeverityTier.HEALTHY


def build_area_tiles(severity: dict[str, AreaSeverity]) -> list[AreaTile]:
    return [
        AreaTile(
            name=area,
            count=stats.count,
            max_days_unresolved=stats.max_days_unresolved,
            tier=severity_tier(stats.max_days_unresolved),
        )
        for area, stats in severity.items()
    ]


def build_area_overview(
    issues: Sequence[IssueRecord],
    window: TimeWindow | str | None,
    now: datetime,
    user_location: Coordinates | None = None,
) -> AreaOverview:
    """
    Everything the area dashboard renders, computed over one window-filtered slice.

    An out-of-range ``user_location`` is dropped rather than rejected.
    """
    resolved_window = resolve_window(window)
    recent = filter_by_window(issues, resolved_window, now)

    if user_location is not None and not is_valid_coordinates(user_location.lat, user_location.lng):
        user_location = None

    return AreaOverview(
        window=resolved_window,
        issues=recent,
        category_counts=count_by_category(recent),
        location_counts=count_by_location(recent),
        area_category_matrix=area_category_matrix(recent),
        tiles=build_area_tiles(severity_by_area(recent)),
        user_location=user_location,
        generated_at=now,
    )
