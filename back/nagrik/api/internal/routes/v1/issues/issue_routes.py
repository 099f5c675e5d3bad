# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.api.internal.utils.permissions import RequestContext, get_request_context, require_roles
from nagrik.core.db import get_async_session
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.dependancies.common import get_geocoder, get_photo_storage
from nagrik.models.auth.user import UserRole
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.schemas.issues import (
    IssueCreate,
    IssueDetailResponse,
    IssueListResponse,
    IssueResponse,
    IssueStatsResponse,
    IssueStatusUpdateCreate,
    PhotoUploadResponse,
)
from nagrik.services.geocoding import Geocoder
from nagrik.services.issues import (
    add_status_update,
    get_issue,
    get_issue_stats,
    issue_to_response,
    list_all_issues,
    list_user_issues,
    report_issue,
)
from nagrik.services.storage import PhotoStorage
from nagrik.settings import settings

router = APIRouter(prefix="/issues", tags=["Issues"])

LIST_PAGINATION = settings.PAGINATION_CONFIGS["large"]


@router.post("", response_model=IssueResponse, status_code=status.HTTP_201_CREATED)
async def create_issue(
    issue_data: IssueCreate,
    context: RequestContext = Depends(get_request_context),
    geocoder: Geocoder = Depends(get_geocoder),
    db: AsyncSession = Depends(get_async_session),
):
    """Report a new civic issue"""
    result = await report_issue(db, context.user, issue_data, geocoder)
    return issue_to_response(result.issue, result.issue.created_at)


@router.post("/upload-photo", response_model=PhotoUploadResponse)
async def upload_photo(
    file: UploadFile = File(...),
    context: RequestContext = Depends(get_request_context),
    storage: PhotoStorage = Depends(get_photo_storage),
):
    """Upload an evidence photo; the returned URL goes into the report"""
    if file.content_type not in settings.ALLOWED_PHOTO_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Only JPEG and PNG photos are allowed",
        )

    data = await file.read()
    if len(data) > settings.MAX_PHOTO_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File size exceeds {settings.MAX_PHOTO_SIZE // (1024 * 1024)}MB limit",
        )

    url = await storage.upload_photo(context.user_id, file.filename, data, file.content_type)
    return PhotoUploadResponse(url=url)


@router.get("/mine", response_model=list[IssueResponse])
async def my_issues(
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_async_session),
):
    """Issues reported by the current user, newest first"""
    return await list_user_issues(db, context.user)


@router.get("", response_model=IssueListResponse)
async def list_issues(
    limit: int = Query(
        LIST_PAGINATION["default_limit"],
        ge=LIST_PAGINATION["min_limit"],
        le=LIST_PAGINATION["max_limit"],
    ),
    offset: int = Query(LIST_PAGINATION["default_offset"], ge=0),
    status: IssueStatus | None = None,
    category: IssueCategory | None = None,
    db: AsyncSession = Depends(get_async_session),
):
    """Public issue list, newest first"""
    issues, total = await list_all_issues(db, status=status, category=category, limit=limit, offset=offset)
    return IssueListResponse(issues=issues, total=total, limit=limit, offset=offset)


@router.get("/stats", response_model=IssueStatsResponse)
async def issue_stats(db: AsyncSession = Depends(get_async_session)):
    return IssueStatsResponse(**await get_issue_stats(db))


@router.get("/{issue_id}", response_model=IssueDetailResponse)
async def issue_detail(issue_id: UUID, db: AsyncSession = Depends(get_async_session)):
    """Issue details with its status history"""
    issue = await get_issue(db, issue_id)
    if issue is None:
        raise HTTPException(status_code=404, detail="Issue not found")
    return issue


@router.post("/{issue_id}/updates", response_model=IssueDetailResponse, status_code=status.HTTP_201_CREATED)
async def post_status_update(
    issue_id: UUID,
    update_data: IssueStatusUpdateCreate,
    context: RequestContext = Depends(require_roles(UserRole.ADMIN, UserRole.WORKER)),
    db: AsyncSession = Depends(get_async_session),
):
    """Move an issue to a new status (admin and field workers only)"""
    logger = get_contextual_logger(__name__, request_id=context.request_id, user_id=context.user_id)

    await add_status_update(db, issue_id, update_data.status, update_data.comment, context.user)
    logger.info(f"Status update posted on issue {issue_id}")

    issue = await get_issue(db, issue_id)
    if issue is None:
        raise HTTPException(status_code=404, detail="Issue not found")
    return issue
