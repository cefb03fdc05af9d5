from typing import List, Optional

from linksly_app.schemas.base import CamelModel


class TopLink(CamelModel):
    id: str
    original_url: str
    short_code: str
    total_clicks: int
    title: Optional[str] = None


class ClicksPerDay(CamelModel):
    """Clicks on one calendar day (UTC), date as YYYY-MM-DD"""
    date: str
    count: int


class AnalyticsOverview(CamelModel):
    total_links: int
    total_clicks: int
    recent_clicks: int
    top_links: List[TopLink]
    clicks_over_time: List[ClicksPerDay]
