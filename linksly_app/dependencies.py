"""
FastAPI dependencies for dependency injection.

Every service is built around the request-scoped database session from
`get_db`, so tests can swap the database by overriding that one dependency.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from linksly_app.database.connection import get_db
from linksly_app.services.analytics_service import AnalyticsService
from linksly_app.services.click_recorder import ClickRecorder
from linksly_app.services.link_service import LinkService


def get_link_service(db: Session = Depends(get_db)) -> LinkService:
    """Get LinkService bound to the request session"""
    return LinkService(db=db)


def get_click_recorder(db: Session = Depends(get_db)) -> ClickRecorder:
    """Get ClickRecorder bound to the request session"""
    return ClickRecorder(db=db)


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    """Get AnalyticsService bound to the request session"""
    return AnalyticsService(db=db)
