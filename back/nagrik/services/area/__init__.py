# Local application imports
from nagrik.services.area.aggregator import (
    PRESEEDED_AREAS,
    area_category_matrix,
    build_area_overview,
    count_by_category,
    count_by_location,
    filter_by_window,
    resolve_window,
    severity_by_area,
    severity_tier,
)
from nagrik.services.area.markers import build_map_markers, marker_color
from nagrik.services.area.records import days_unresolved, to_issue_record, to_issue_records
from nagrik.services.area.types import (
    AreaOverview,
    AreaSeverity,
    AreaTile,
    Coordinates,
    IssueRecord,
    SeverityTier,
    TimeWindow,
)

__all__ = [
    "PRESEEDED_AREAS",
    "AreaOverview",
    "AreaSeverity",
    "AreaTile",
    "Coordinates",
    "IssueRecord",
    "SeverityTier",
    "TimeWindow",
    "area_category_matrix",
    "build_area_overview",
    "build_map_markers",
    "count_by_category",
    "count_by_location",
    "days_unresolved",
    "filter_by_window",
    "marker_color",
    "resolve_window",
    "severity_by_area",
    "severity_tier",
    "to_issue_record",
    "to_issue_records",
]
