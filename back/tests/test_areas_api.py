"""
Area dashboards, map markers and helplines over HTTP.
"""

# Standard library imports
from datetime import UTC, datetime, timedelta
from uuid import UUID

# Third-party imports
import pytest
from sqlalchemy import update

# Local application imports
from nagrik.models import Issue
from nagrik.services.area import PRESEEDED_AREAS
from nagrik.services.area.markers import CRITICAL_COLOR

pytestmark = pytest.mark.asyncio

AREAS_URL = "/api/v1/areas"


async def report(client, headers, **overrides) -> dict:
    payload = {
        "description": "Overflowing bins near the market gate",
        "category": "Waste",
        "location": "Market Street",
    }
    payload.update(overrides)
    resp = await client.post("/api/v1/issues", headers=headers, json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def backdate(session_factory, issue_id: str, days: int) -> None:
    """Pretend an issue was reported ``days`` ago."""
    async with session_factory() as db:
        await db.execute(
            update(Issue)
            .where(Issue.id == UUID(issue_id))
            .values(created_at=datetime.now(UTC) - timedelta(days=days, hours=1))
        )
        await db.commit()


class TestOverview:
    async def test_empty_overview_has_preseeded_tiles(self, client):
        resp = await client.get(f"{AREAS_URL}/overview")

        data = resp.json()
        assert resp.status_code == 200
        assert data["window"] == "all"
        assert data["total"] == 0
        assert data["category_counts"] == {}
        assert data["location_counts"] == {}
        assert [tile["name"] for tile in data["tiles"]] == list(PRESEEDED_AREAS)
        assert {tile["tier"] for tile in data["tiles"]} == {"healthy"}

    async def test_counts_and_matrix(self, client, citizen_headers):
        await report(client, citizen_headers)
        await report(client, citizen_headers, category="Water")
        await report(client, citizen_headers, location="Sector 9 Market")

        data = (await client.get(f"{AREAS_URL}/overview", params={"window": "24h"})).json()

        assert data["window"] == "24h"
        assert data["total"] == 3
        assert data["category_counts"] == {"Waste": 2, "Water": 1}
        assert data["location_counts"] == {"Market Street": 2, "Sector 9 Market": 1}
        assert data["area_category_matrix"]["Market Street"] == {"Waste": 1, "Water": 1}
        assert len(data["recent_issues"]) == 3

    async def test_window_excludes_older_issues(self, client, citizen_headers, session_factory):
        old = await report(client, citizen_headers, location="Old Town Road")
        await report(client, citizen_headers)
        await backdate(session_factory, old["id"], days=8)

        data = (await client.get(f"{AREAS_URL}/overview", params={"window": "7d"})).json()

        assert data["location_counts"] == {"Market Street": 1}
        assert "Old Town Road" not in {tile["name"] for tile in data["tiles"]}

    async def test_unknown_window_falls_back_to_all(self, client, citizen_headers):
        await report(client, citizen_headers)
        data = (await client.get(f"{AREAS_URL}/overview", params={"window": "fortnight"})).json()
        assert data["window"] == "all"
        assert data["total"] == 1

    async def test_user_location_hint(self, client):
        data = (await client.get(f"{AREAS_URL}/overview", params={"lat": 28.6, "lng": 77.2})).json()
        assert data["user_location"] == {"lat": 28.6, "lng": 77.2}

        data = (await client.get(f"{AREAS_URL}/overview", params={"lat": 0, "lng": 0})).json()
        assert data["user_location"] is None


class TestSeverity:
    async def test_old_unresolved_issue_is_critical(self, client, citizen_headers, session_factory):
        created = await report(client, citizen_headers)
        await backdate(session_factory, created["id"], days=7)

        data = (await client.get(f"{AREAS_URL}/severity")).json()

        assert data["Market Street"] == {"count": 1, "max_days_unresolved": 7, "tier": "critical"}
        assert data["Sector 4 Park"] == {"count": 0, "max_days_unresolved": 0, "tier": "healthy"}

    async def test_resolved_issue_does_not_count(self, client, citizen_headers, admin_headers, session_factory):
        created = await report(client, citizen_headers)
        await backdate(session_factory, created["id"], days=10)
        await client.post(
            f"/api/v1/issues/{created['id']}/updates", headers=admin_headers, json={"status": "Resolved"}
        )

        data = (await client.get(f"{AREAS_URL}/severity")).json()

        assert data["Market Street"] == {"count": 0, "max_days_unresolved": 0, "tier": "healthy"}


class TestMarkers:
    async def test_only_geocoded_issues_get_markers(self, client, citizen_headers, session_factory):
        located = await report(client, citizen_headers)
        await report(client, citizen_headers, location="Unmapped Lane 7")
        await backdate(session_factory, located["id"], days=6)

        markers = (await client.get(f"{AREAS_URL}/markers")).json()

        assert len(markers) == 1
        assert markers[0]["id"] == located["id"]
        assert (markers[0]["lat"], markers[0]["lng"]) == (28.65, 77.23)
        assert markers[0]["color"] == CRITICAL_COLOR


class TestAreaStats:
    async def test_counters_per_area(self, client, citizen_headers):
        await report(client, citizen_headers)
        await report(client, citizen_headers)
        await report(client, citizen_headers, location="Sector 9 Market")

        rows = (await client.get(f"{AREAS_URL}/stats")).json()

        assert [(row["location"], row["total_issues"], row["pending_issues"]) for row in rows] == [
            ("Market Street", 2, 2),
            ("Sector 9 Market", 1, 1),
        ]


class TestReverseGeocode:
    async def test_returns_address(self, client):
        resp = await client.get(f"{AREAS_URL}/reverse-geocode", params={"lat": 28.63, "lng": 77.21})
        assert resp.status_code == 200
        assert resp.json() == {"lat": 28.63, "lng": 77.21, "address": "Janpath, New Delhi"}

    async def test_rejects_out_of_range(self, client):
        resp = await client.get(f"{AREAS_URL}/reverse-geocode", params={"lat": 95, "lng": 77.21})
        assert resp.status_code == 400


class TestHelplines:
    async def test_list(self, client):
        data = (await client.get("/api/v1/helplines")).json()
        assert "default" in data
        assert data["water"]["primary_helpline"] == "1916"

    async def test_category(self, client):
        data = (await client.get("/api/v1/helplines/Electricity")).json()
        assert data["authority"] == "Delhi DISCOMs"

    async def test_unknown_category_gets_default(self, client):
        data = (await client.get("/api/v1/helplines/Noise")).json()
        assert data["primary_helpline"] == "1076"
