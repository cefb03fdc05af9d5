"""
Analytics Aggregator

Read-only dashboard statistics computed straight from the links and clicks
tables. Nothing is cached: every call re-runs the aggregate queries.
"""

from datetime import date, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from linksly_app.config import settings
from linksly_app.models import Click, Link
from linksly_app.schemas.analytics import AnalyticsOverview, ClicksPerDay, TopLink
from linksly_app.utils import utc_now


class AnalyticsService:
    """Service for the analytics overview"""

    def __init__(self, db: Session):
        self.db = db

    def overview(self) -> AnalyticsOverview:
        """
        Build the dashboard overview.

        Returns:
            AnalyticsOverview with:
            - total_links: number of links
            - total_clicks: number of click rows (the ground truth behind
              the per-link counters)
            - recent_clicks: clicks inside the recent window
            - top_links: most clicked links, ties broken by id
            - clicks_over_time: clicks per UTC day inside the recent window
        """
        since = utc_now() - timedelta(days=settings.recent_clicks_days)

        total_links = self.db.query(func.count(Link.id)).scalar() or 0
        total_clicks = self.db.query(func.count(Click.id)).scalar() or 0
        recent_clicks = (
            self.db.query(func.count(Click.id))
            .filter(Click.created_at >= since)
            .scalar()
        ) or 0

        return AnalyticsOverview(
            total_links=total_links,
            total_clicks=total_clicks,
            recent_clicks=recent_clicks,
            top_links=self.top_links(),
            clicks_over_time=self.clicks_over_time(since),
        )

    def top_links(self, limit: int = None) -> list:
        """Get the most clicked links"""
        links = (
            self.db.query(Link)
            .order_by(Link.total_clicks.desc(), Link.id.asc())
            .limit(limit or settings.top_links_limit)
            .all()
        )
        return [TopLink.model_validate(link) for link in links]

    def clicks_over_time(self, since) -> list:
        """Get clicks per day since `since`, oldest day first"""
        day = func.date(Click.created_at)
        rows = (
            self.db.query(day.label("day"), func.count(Click.id).label("count"))
            .filter(Click.created_at >= since)
            .group_by(day)
            .order_by(day)
            .all()
        )
        return [
            ClicksPerDay(date=_format_day(row.day), count=row.count)
            for row in rows
        ]


def _format_day(value) -> str:
    # SQLite returns 'YYYY-MM-DD' strings, PostgreSQL returns date objects
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
