"""
Unit tests for the pure area aggregation functions.
"""

# Standard library imports
from datetime import UTC, datetime, timedelta

# Third-party imports
import pytest

# Local application imports
from nagrik.models.issues.enums import IssueCategory, IssueStatus
from nagrik.services.area import (
    PRESEEDED_AREAS,
    AreaSeverity,
    Coordinates,
    IssueRecord,
    SeverityTier,
    TimeWindow,
    area_category_matrix,
    build_area_overview,
    count_by_category,
    count_by_location,
    filter_by_window,
    resolve_window,
    severity_by_area,
    severity_tier,
)

NOW = datetime(2024, 5, 20, 12, 0, tzinfo=UTC)


def make_issue(
    location: str = "Sector 9",
    category: IssueCategory = IssueCategory.WASTE,
    status: IssueStatus = IssueStatus.PENDING,
    days_unresolved: int | None = 0,
    age: timedelta = timedelta(hours=1),
    issue_id: str = "i-1",
) -> IssueRecord:
    return IssueRecord(
        id=issue_id,
        category=category,
        location=location,
        status=status,
        created_at=NOW - age,
        days_unresolved=None if status == IssueStatus.RESOLVED else days_unresolved,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# TIME WINDOWS
# ═══════════════════════════════════════════════════════════════════════════════


class TestFilterByWindow:
    def test_all_is_identity(self):
        issues = [make_issue(age=timedelta(days=400), issue_id="old"), make_issue(issue_id="new")]
        for now in (NOW, NOW - timedelta(days=1000), NOW + timedelta(days=1000)):
            assert filter_by_window(issues, TimeWindow.ALL, now) == issues

    def test_unknown_tag_behaves_like_all(self):
        issues = [make_issue(age=timedelta(days=90))]
        assert filter_by_window(issues, "fortnight", NOW) == issues
        assert resolve_window("fortnight") == TimeWindow.ALL
        assert resolve_window(None) == TimeWindow.ALL

    @pytest.mark.parametrize(
        ("window", "span"),
        [("24h", timedelta(hours=24)), ("7d", timedelta(days=7)), ("30d", timedelta(days=30))],
    )
    def test_boundary_is_inclusive(self, window, span):
        on_edge = make_issue(age=span, issue_id="edge")
        just_outside = make_issue(age=span + timedelta(seconds=1), issue_id="outside")
        inside = make_issue(age=span - timedelta(seconds=1), issue_id="inside")

        result = filter_by_window([on_edge, just_outside, inside], window, NOW)

        assert [issue.id for issue in result] == ["edge", "inside"]

    def test_keeps_input_order_and_does_not_mutate(self):
        issues = [make_issue(issue_id=str(n), age=timedelta(hours=n)) for n in (3, 1, 2)]
        snapshot = list(issues)

        result = filter_by_window(issues, "24h", NOW)

        assert [issue.id for issue in result] == ["3", "1", "2"]
        assert issues == snapshot
        assert result is not issues

    def test_naive_now_is_read_as_utc(self):
        issue = make_issue(age=timedelta(hours=23))
        assert filter_by_window([issue], "24h", NOW.replace(tzinfo=None)) == [issue]


# ═══════════════════════════════════════════════════════════════════════════════
# COUNTS
# ═══════════════════════════════════════════════════════════════════════════════


class TestCounts:
    def test_category_counts_sum_to_input_length(self):
        issues = [
            make_issue(category=IssueCategory.WASTE),
            make_issue(category=IssueCategory.WATER),
            make_issue(category=IssueCategory.WASTE, status=IssueStatus.RESOLVED),
            make_issue(category=IssueCategory.AIR),
        ]

        counts = count_by_category(issues)

        assert counts == {IssueCategory.WASTE: 2, IssueCategory.WATER: 1, IssueCategory.AIR: 1}
        assert sum(counts.values()) == len(issues)

    def test_location_keys_are_case_sensitive(self):
        counts = count_by_location([make_issue(location="Market Street"), make_issue(location="market street")])
        assert counts == {"Market Street": 1, "market street": 1}

    def test_matrix_omits_empty_cells(self):
        matrix = area_category_matrix(
            [
                make_issue(location="X", category=IssueCategory.WASTE),
                make_issue(location="X", category=IssueCategory.WASTE),
                make_issue(location="Y", category=IssueCategory.ENERGY),
            ]
        )
        assert matrix == {"X": {IssueCategory.WASTE: 2}, "Y": {IssueCategory.ENERGY: 1}}

    def test_empty_input_gives_empty_mappings(self):
        assert count_by_category([]) == {}
        assert count_by_location([]) == {}
        assert area_category_matrix([]) == {}


# ═══════════════════════════════════════════════════════════════════════════════
# SEVERITY
# ═══════════════════════════════════════════════════════════════════════════════


class TestSeverity:
    def test_resolved_issues_register_area_but_never_count(self):
        severity = severity_by_area(
            [
                make_issue(location="X", days_unresolved=7),
                make_issue(location="X", status=IssueStatus.RESOLVED, days_unresolved=10),
            ]
        )

        assert severity["X"] == AreaSeverity(count=1, max_days_unresolved=7)
        assert severity_tier(severity["X"].max_days_unresolved) == SeverityTier.CRITICAL

    def test_area_with_only_resolved_issues_is_zeroed(self):
        severity = severity_by_area([make_issue(location="Y", status=IssueStatus.RESOLVED)])
        assert severity["Y"] == AreaSeverity(count=0, max_days_unresolved=0)

    def test_preseeded_areas_present_on_empty_input(self):
        severity = severity_by_area([])
        assert list(severity) == list(PRESEEDED_AREAS)
        assert all(stats == AreaSeverity() for stats in severity.values())

    def test_preseeded_areas_follow_input_areas(self):
        severity = severity_by_area([make_issue(location="Zeta Colony"), make_issue(location="Sector 4 Park")])
        assert list(severity)[:2] == ["Zeta Colony", "Sector 4 Park"]
        assert set(PRESEEDED_AREAS) <= set(severity)
        assert severity["Sector 4 Park"].count == 1

    def test_max_days_takes_oldest_unresolved(self):
        severity = severity_by_area(
            [
                make_issue(location="X", days_unresolved=2),
                make_issue(location="X", status=IssueStatus.IN_PROGRESS, days_unresolved=4),
                make_issue(location="X", days_unresolved=1),
            ]
        )
        assert severity["X"] == AreaSeverity(count=3, max_days_unresolved=4)

    @pytest.mark.parametrize(
        ("days", "tier"),
        [
            (None, SeverityTier.HEALTHY),
            (0, SeverityTier.HEALTHY),
            (2, SeverityTier.HEALTHY),
            (3, SeverityTier.WARNING),
            (5, SeverityTier.WARNING),
            (6, SeverityTier.CRITICAL),
            (30, SeverityTier.CRITICAL),
        ],
    )
    def test_tier_boundaries(self, days, tier):
        assert severity_tier(days) == tier


# ═══════════════════════════════════════════════════════════════════════════════
# OVERVIEW
# ═══════════════════════════════════════════════════════════════════════════════


class TestOverview:
    def test_aggregates_only_the_window(self):
        issues = [
            make_issue(location="X", category=IssueCategory.WATER, age=timedelta(hours=2), issue_id="recent"),
            make_issue(location="Y", category=IssueCategory.AIR, age=timedelta(days=10), issue_id="old"),
        ]

        overview = build_area_overview(issues, "7d", NOW)

        assert overview.window == TimeWindow.LAST_7_DAYS
        assert [issue.id for issue in overview.issues] == ["recent"]
        assert overview.category_counts == {IssueCategory.WATER: 1}
        assert overview.location_counts == {"X": 1}
        assert "Y" not in {tile.name for tile in overview.tiles}

    def test_tiles_cover_preseeded_areas(self):
        overview = build_area_overview([], TimeWindow.ALL, NOW)
        assert [tile.name for tile in overview.tiles] == list(PRESEEDED_AREAS)
        assert {tile.tier for tile in overview.tiles} == {SeverityTier.HEALTHY}

    def test_unknown_window_reports_all(self):
        assert build_area_overview([], "yesterday", NOW).window == TimeWindow.ALL

    def test_invalid_user_location_is_dropped(self):
        assert build_area_overview([], "all", NOW, Coordinates(lat=120.0, lng=77.2)).user_location is None
        assert build_area_overview([], "all", NOW, Coordinates(lat=0.0, lng=0.0)).user_location is None

        hint = Coordinates(lat=28.6, lng=77.2)
        assert build_area_overview([], "all", NOW, hint).user_location == hint

    def test_repeated_calls_return_fresh_containers(self):
        issues = [make_issue()]
        first = build_area_overview(issues, "all", NOW)
        second = build_area_overview(issues, "all", NOW)

        assert first == second
        assert first.category_counts is not second.category_counts
        first.category_counts.clear()
        assert second.category_counts == {IssueCategory.WASTE: 1}
