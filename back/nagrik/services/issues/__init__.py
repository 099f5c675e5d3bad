# Local application imports
from nagrik.services.issues.issue_services import (
    IssueWriteResult,
    add_status_update,
    get_issue,
    get_issue_stats,
    issue_to_response,
    list_all_issues,
    list_user_issues,
    load_issue_records,
    report_issue,
)

__all__ = [
    "IssueWriteResult",
    "add_status_update",
    "get_issue",
    "get_issue_stats",
    "issue_to_response",
    "list_all_issues",
    "list_user_issues",
    "load_issue_records",
    "report_issue",
]
