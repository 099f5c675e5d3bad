# Standard library imports
from datetime import datetime

# Third-party imports
from pydantic import BaseModel, ConfigDict

# Local application imports
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.services.area.types import SeverityTier, TimeWindow


class CoordinatesResponse(BaseModel):
    lat: float
    lng: float


class AreaIssueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    category: IssueCategory
    location: str
    status: IssueStatus
    description: str
    created_at: datetime
    days_unresolved: int | None


class AreaTileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    count: int
    max_days_unresolved: int
    tier: SeverityTier


class AreaSeverityResponse(BaseModel):
    count: int
    max_days_unresolved: int
    tier: SeverityTier


class AreaOverviewResponse(BaseModel):
    window: TimeWindow
    total: int
    category_counts: dict[IssueCategory, int]
    location_counts: dict[str, int]
    area_category_matrix: dict[str, dict[IssueCategory, int]]
    tiles: list[AreaTileResponse]
    recent_issues: list[AreaIssueResponse]
    user_location: CoordinatesResponse | None = None


class MapMarkerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    category: IssueCategory
    location: str
    status: IssueStatus
    lat: float
    lng: float
    days_unresolved: int
    color: str


class AreaStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    location: str
    total_issues: int
    pending_issues: int
    in_progress_issues: int
    resolved_issues: int


class ReverseGeocodeResponse(BaseModel):
    lat: float
    lng: float
    address: str


class HelplineResponse(BaseModel):
    authority: str
    primary_helpline: str
    alternate_helpline: str
    department: str
    portal: str
    description: str
