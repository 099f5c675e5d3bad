# Standard library imports
from datetime import UTC, datetime

# Third-party imports
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.core.db import get_async_session
from nagrik.db_selectors.issues import list_area_stats
from nagrik.dependancies.common import get_geocoder
from nagrik.schemas.issues import (
    AreaIssueResponse,
    AreaOverviewResponse,
    AreaSeverityResponse,
    AreaStatsResponse,
    AreaTileResponse,
    CoordinatesResponse,
    MapMarkerResponse,
    ReverseGeocodeResponse,
)
from nagrik.services.area import (
    Coordinates,
    build_area_overview,
    build_map_markers,
    filter_by_window,
    severity_by_area,
    severity_tier,
)
from nagrik.services.geocoding import Geocoder
from nagrik.services.issues import load_issue_records

router = APIRouter(prefix="/areas", tags=["Areas"])

WINDOW_DESCRIPTION = "One of 24h, 7d, 30d or all; anything else is treated as all"


@router.get("/overview", response_model=AreaOverviewResponse)
async def area_overview(
    window: str = Query("all", description=WINDOW_DESCRIPTION),
    lat: float | None = None,
    lng: float | None = None,
    recent_limit: int = Query(10, ge=0, le=100),
    db: AsyncSession = Depends(get_async_session),
):
    """Counts, area/category breakdown and severity tiles for one time window"""
    now = datetime.now(UTC)
    user_location = Coordinates(lat=lat, lng=lng) if lat is not None and lng is not None else None

    overview = build_area_overview(await load_issue_records(db, now), window, now, user_location)

    return AreaOverviewResponse(
        window=overview.window,
        total=len(overview.issues),
        category_counts=overview.category_counts,
        location_counts=overview.location_counts,
        area_category_matrix=overview.area_category_matrix,
        tiles=[AreaTileResponse.model_validate(tile) for tile in overview.tiles],
        recent_issues=[AreaIssueResponse.model_validate(issue) for issue in overview.issues[:recent_limit]],
        user_location=(
            CoordinatesResponse(lat=overview.user_location.lat, lng=overview.user_location.lng)
            if overview.user_location
            else None
        ),
    )


@router.get("/severity", response_model=dict[str, AreaSeverityResponse])
async def area_severity(
    window: str = Query("all", description=WINDOW_DESCRIPTION),
    db: AsyncSession = Depends(get_async_session),
):
    """Unresolved count, oldest unresolved age and tier per area"""
    now = datetime.now(UTC)
    severity = severity_by_area(filter_by_window(await load_issue_records(db, now), window, now))
    return {
        area: AreaSeverityResponse(
            count=stats.count,
            max_days_unresolved=stats.max_days_unresolved,
            tier=severity_tier(stats.max_days_unresolved),
        )
        for area, stats in severity.items()
    }


@router.get("/markers", response_model=list[MapMarkerResponse])
async def map_markers(
    window: str = Query("all", description=WINDOW_DESCRIPTION),
    db: AsyncSession = Depends(get_async_session),
):
    """Map pins for every issue with known coordinates"""
    now = datetime.now(UTC)
    markers = build_map_markers(filter_by_window(await load_issue_records(db, now), window, now))
    return [MapMarkerResponse.model_validate(marker) for marker in markers]


@router.get("/stats", response_model=list[AreaStatsResponse])
async def area_stats(db: AsyncSession = Depends(get_async_session)):
    """Per-area status counters, busiest areas first"""
    return [AreaStatsResponse.model_validate(row) for row in await list_area_stats(db)]


@router.get("/reverse-geocode", response_model=ReverseGeocodeResponse)
async def reverse_geocode(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    geocoder: Geocoder = Depends(get_geocoder),
):
    """Human-readable address for a map position"""
    return ReverseGeocodeResponse(lat=lat, lng=lng, address=await geocoder.reverse_geocode(lat, lng))
