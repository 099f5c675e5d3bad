from .area_schemas import (
    AreaIssueResponse,
    AreaOverviewResponse,
    AreaSeverityResponse,
    AreaStatsResponse,
    AreaTileResponse,
    CoordinatesResponse,
    HelplineResponse,
    MapMarkerResponse,
    ReverseGeocodeResponse,
)
from .issue_schemas import (
    IssueCreate,
    IssueDetailResponse,
    IssueListResponse,
    IssueResponse,
    IssueStatsResponse,
    IssueStatusUpdateCreate,
    IssueUpdateResponse,
    PhotoUploadResponse,
)

__all__ = [
    "AreaIssueResponse",
    "AreaOverviewResponse",
    "AreaSeverityResponse",
    "AreaStatsResponse",
    "AreaTileResponse",
    "CoordinatesResponse",
    "HelplineResponse",
    "IssueCreate",
    "IssueDetailResponse",
    "IssueListResponse",
    "IssueResponse",
    "IssueStatsResponse",
    "IssueStatusUpdateCreate",
    "IssueUpdateResponse",
    "MapMarkerResponse",
    "PhotoUploadResponse",
    "ReverseGeocodeResponse",
]
