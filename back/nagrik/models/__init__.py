"""
Database models package.

This package contains all SQLAlchemy models for the application.
"""

# Local application imports
from nagrik.models.base import Base
from nagrik.models.auth import OTP, Session, User, UserRole
from nagrik.models.issues import AreaStats, Issue, IssueCategory, IssueStatus, IssueUpdate

__all__ = [
    "Base",
    # Authentication models
    "OTP",
    "Session",
    "User",
    "UserRole",
    # Issue reporting models
    "AreaStats",
    "Issue",
    "IssueCategory",
    "IssueStatus",
    "IssueUpdate",
]
