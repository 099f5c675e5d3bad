# Standard library imports
from datetime import UTC, datetime, timedelta

# Third-party imports
import pytest

# Local application imports
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.models.issues.issue import Issue
from nagrik.services.area import IssueRecord, build_map_markers, days_unresolved, marker_color, to_issue_record
from nagrik.services.area.markers import CRITICAL_COLOR, DEFAULT_COLOR, WARNING_COLOR

NOW = datetime(2024, 5, 20, 12, 0, tzinfo=UTC)


class TestDaysUnresolved:
    def test_whole_days_are_floored(self):
        assert days_unresolved(NOW - timedelta(days=2, hours=23), IssueStatus.PENDING, NOW) == 2

    def test_resolved_issue_has_no_age(self):
        assert days_unresolved(NOW - timedelta(days=9), IssueStatus.RESOLVED, NOW) is None

    def test_future_timestamp_clamps_to_zero(self):
        assert days_unresolved(NOW + timedelta(hours=5), IssueStatus.IN_PROGRESS, NOW) == 0

    def test_naive_created_at_is_utc(self):
        naive = (NOW - timedelta(days=4)).replace(tzinfo=None)
        assert days_unresolved(naive, IssueStatus.PENDING, NOW) == 4


class TestToIssueRecord:
    def test_copies_fields_and_derives_age(self):
        issue = Issue(
            category=IssueCategory.WATER,
            description="Pipe burst near the school gate",
            location="Sector 4 Park",
            status=IssueStatus.PENDING,
            lat=28.6,
            lng=77.2,
        )
        issue.created_at = (NOW - timedelta(days=6)).replace(tzinfo=None)

        record = to_issue_record(issue, NOW)

        assert record.category == IssueCategory.WATER
        assert record.location == "Sector 4 Park"
        assert record.created_at.tzinfo is not None
        assert record.days_unresolved == 6
        assert record.coordinates is not None


class TestMarkers:
    @pytest.mark.parametrize(
        ("category", "days", "color"),
        [
            (IssueCategory.WASTE, 6, CRITICAL_COLOR),
            (IssueCategory.WATER, 5, WARNING_COLOR),
            (IssueCategory.AIR, 3, WARNING_COLOR),
            (IssueCategory.WASTE, 2, "#84cc16"),
            (IssueCategory.WATER, 0, "#3b82f6"),
            (IssueCategory.AIR, None, "#8b5cf6"),
            (IssueCategory.TRANSPORT, 1, "#f97316"),
            (IssueCategory.ENERGY, 1, "#ec4899"),
            (IssueCategory.ROADS, 1, DEFAULT_COLOR),
        ],
    )
    def test_color(self, category, days, color):
        assert marker_color(category, days) == color

    def test_issues_without_usable_coordinates_are_skipped(self):
        def record(issue_id, lat, lng):
            return IssueRecord(
                id=issue_id,
                category=IssueCategory.WASTE,
                location="X",
                status=IssueStatus.PENDING,
                created_at=NOW,
                days_unresolved=4,
                lat=lat,
                lng=lng,
            )

        markers = build_map_markers([record("a", 28.6, 77.2), record("b", None, None), record("c", 0.0, 0.0)])

        assert [marker.id for marker in markers] == ["a"]
        assert markers[0].color == WARNING_COLOR
        assert markers[0].days_unresolved == 4
