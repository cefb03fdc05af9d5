from fastapi import APIRouter, Depends

from linksly_app.schemas.analytics import AnalyticsOverview
from linksly_app.services.analytics_service import AnalyticsService
from linksly_app.dependencies import get_analytics_service

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/overview", response_model=AnalyticsOverview)
def get_overview(
    analytics_service: AnalyticsService = Depends(get_analytics_service)
):
    """Dashboard totals, top links and clicks per day for the last week"""
    return analytics_service.overview()
