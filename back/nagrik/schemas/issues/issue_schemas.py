# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local application imports
from nagrik.models.issues.enums import IssueCategory, IssueStatus


class IssueCreate(BaseModel):
    description: str = Field(..., min_length=10)
    category: IssueCategory = IssueCategory.GENERAL
    location: str = Field(..., min_length=5, max_length=200, description="Area name, stored exactly as typed")
    affected_count: int = Field(1, ge=1)
    photo_url: str | None = None

    @field_validator("location")
    @classmethod
    def location_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Location is required")
        return v


class IssueStatusUpdateCreate(BaseModel):
    status: IssueStatus
    comment: str | None = Field(None, max_length=1000)


class IssueUpdateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    status: IssueStatus
    comment: str | None
    author_id: UUID | None
    created_at: datetime


class IssueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    category: IssueCategory
    description: str
    location: str
    status: IssueStatus
    affected_count: int
    photo_url: str | None
    lat: float | None
    lng: float | None
    address: str | None
    reporter_id: UUID
    days_unresolved: int | None = None
    created_at: datetime
    updated_at: datetime


class IssueDetailResponse(IssueResponse):
    updates: list[IssueUpdateResponse] = Field(default_factory=list)


class IssueListResponse(BaseModel):
    issues: list[IssueResponse]
    total: int
    limit: int
    offset: int


class IssueStatsResponse(BaseModel):
    total: int
    pending: int
    in_progress: int
    resolved: int


class PhotoUploadResponse(BaseModel):
    url: str
