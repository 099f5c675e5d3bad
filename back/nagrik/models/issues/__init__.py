# Local application imports
from nagrik.models.issues.area_stats import AreaStats
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.models.issues.issue import Issue, IssueUpdate

__all__ = ["AreaStats", "Issue", "IssueCategory", "IssueStatus", "IssueUpdate"]
