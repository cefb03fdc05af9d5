from datetime import timedelta

from fastapi.testclient import TestClient

from linksly_app.models import Click, Link
from linksly_app.services.analytics_service import AnalyticsService
from linksly_app.utils import utc_now


def visit(client: TestClient, short_code: str, times: int = 1):
    for _ in range(times):
        response = client.get(f"/s/{short_code}", follow_redirects=False)
        assert response.status_code == 302


class TestAnalyticsOverview:
    """Test GET /api/analytics/overview"""

    def test_empty_overview(self, client: TestClient):
        response = client.get("/api/analytics/overview")
        assert response.status_code == 200
        assert response.json() == {
            "totalLinks": 0,
            "totalClicks": 0,
            "recentClicks": 0,
            "topLinks": [],
            "clicksOverTime": [],
        }

    def test_totals_match_counters(self, client: TestClient, db_session, create_link):
        """totalClicks equals both the click rows and the sum of per-link counters"""
        first = create_link(originalUrl="https://example.com/1")
        second = create_link(originalUrl="https://example.com/2")
        visit(client, first["shortCode"], 3)
        visit(client, second["shortCode"], 2)

        overview = client.get("/api/analytics/overview").json()

        counter_sum = sum(link.total_clicks for link in db_session.query(Link).all())
        assert overview["totalLinks"] == 2
        assert overview["totalClicks"] == 5
        assert overview["totalClicks"] == counter_sum
        assert overview["totalClicks"] == db_session.query(Click).count()
        assert overview["recentClicks"] == 5

    def test_top_links(self, client: TestClient, create_link):
        links = [create_link(originalUrl=f"https://example.com/{i}", title=f"Link {i}") for i in range(7)]
        for clicks, link in enumerate(links):
            visit(client, link["shortCode"], clicks)

        top_links = client.get("/api/analytics/overview").json()["topLinks"]

        assert len(top_links) == 5
        assert [link["totalClicks"] for link in top_links] == [6, 5, 4, 3, 2]
        assert top_links[0]["id"] == links[6]["id"]
        assert top_links[0]["shortCode"] == links[6]["shortCode"]
        assert top_links[0]["originalUrl"] == "https://example.com/6"
        assert top_links[0]["title"] == "Link 6"

    def test_top_link_ties_are_ordered_by_id(self, db_session, create_link):
        ids = sorted(create_link(originalUrl=f"https://example.com/{i}")["id"] for i in range(3))

        top_links = AnalyticsService(db_session).top_links()

        assert [link.id for link in top_links] == ids

    def test_clicks_over_time(self, client: TestClient, db_session, create_link):
        link = create_link(originalUrl="https://example.com")
        visit(client, link["shortCode"], 2)

        now = utc_now()
        db_session.add_all([
            Click(link_id=link["id"], created_at=now - timedelta(days=2)),
            Click(link_id=link["id"], created_at=now - timedelta(days=10)),
        ])
        db_session.commit()

        overview = client.get("/api/analytics/overview").json()

        assert overview["totalClicks"] == 4
        assert overview["recentClicks"] == 3
        assert overview["clicksOverTime"] == [
            {"date": (now - timedelta(days=2)).date().isoformat(), "count": 1},
            {"date": now.date().isoformat(), "count": 2},
        ]
