# Standard library imports
from collections.abc import Iterable
from dataclasses import dataclass

# Local application imports
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.services.area.aggregator import CRITICAL_AFTER_DAYS, WARNING_FROM_DAYS
from nagrik.services.area.types import IssueRecord

CRITICAL_COLOR = "#ef4444"  # red
WARNING_COLOR = "#f59e0b"  # amber
DEFAULT_COLOR = "#6b7280"  # gray

CATEGORY_COLORS: dict[IssueCategory, str] = {
    IssueCategory.WASTE: "#84cc16",  # lime
    IssueCategory.WATER: "#3b82f6",  # blue
    IssueCategory.AIR: "#8b5cf6",  # purple
    IssueCategory.TRANSPORT: "#f97316",  # orange
    IssueCategory.ENERGY: "#ec4899",  # pink
}


@dataclass(frozen=True)
class MapMarker:
    id: str
    category: IssueCategory
    location: str
    status: IssueStatus
    lat: float
    lng: float
    days_unresolved: int
    color: str


def marker_color(category: IssueCategory, days_unresolved: int | None) -> str:
    """Urgency wins over category: long-unresolved issues are red or amber whatever their kind."""
    days = days_unresolved or 0
    if days > CRITICAL_AFTER_DAYS:
        return CRITICAL_COLOR
    if days >= WARNING_FROM_DAYS:
        return WARNING_COLOR
    return CATEGORY_COLORS.get(category, DEFAULT_COLOR)


def build_map_markers(issues: Iterable[IssueRecord]) -> list[MapMarker]:
    """One marker per issue with usable coordinates; issues without them are skipped."""
    markers = []
    for issue in issues:
        coordinates = issue.coordinates
        if coordinates is None:
            continue
        markers.append(
            MapMarker(
                id=issue.id,
                category=issue.category,
                location=issue.location,
                status=issue.status,
                lat=coordinates.lat,
                lng=coordinates.lng,
                days_unresolved=issue.days_unresolved or 0,
                color=marker_color(issue.category, issue.days_unresolved),
            )
        )
    return markers
