# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

# Local application imports
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.utils.geo_utils import is_valid_coordinates


class TimeWindow(str, Enum):
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    ALL = "all"


class SeverityTier(str, Enum):
    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class IssueRecord:
    """Read-only view of an issue as the area dashboards see it."""

    id: str
    category: IssueCategory
    location: str
    status: IssueStatus
    created_at: datetime
    days_unresolved: int | None = None
    lat: float | None = None
    lng: float | None = None
    description: str = ""

    @property
    def is_resolved(self) -> bool:
        return self.status == IssueStatus.RESOLVED

    @property
    def coordinates(self) -> Coordinates | None:
        if is_valid_coordinates(self.lat, self.lng):
            return Coordinates(lat=self.lat, lng=self.lng)  # type: ignore[arg-type]
        return None


@dataclass(frozen=True)
class AreaSeverity:
    count: int = 0
    max_days_unresolved: int = 0


@dataclass(frozen=True)
class AreaTile:
    name: str
    count: int
    max_days_unresolved: int
    tier: SeverityTier


@dataclass(frozen=True)
class AreaOverview:
    window: TimeWindow
    issues: list[IssueRecord]
    category_counts: dict[IssueCategory, int]
    location_counts: dict[str, int]
    area_category_matrix: dict[str, dict[IssueCategory, int]]
    tiles: list[AreaTile]
    user_location: Coordinates | None = None
    generated_at: datetime | None = field(default=None, compare=False)
