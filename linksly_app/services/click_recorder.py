import logging

from sqlalchemy import update
from sqlalchemy.orm import Session

from linksly_app.models import Click, Link
from linksly_app.schemas.click import RequestMetadata

logger = logging.getLogger(__name__)


class ClickRecorder:
    """
    Records one visit through the redirect path.

    The click row and the `total_clicks` increment commit in one
    transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def record(self, link_id: str, metadata: RequestMetadata) -> Click:
        """
        Insert a Click for `link_id` and bump the link's counter by one.

        The increment runs as `total_clicks = total_clicks + 1` in SQL.

        Raises:
            SQLAlchemyError: Propagated after rolling back both writes
        """
        click = Click(
            link_id=link_id,
            ip=metadata.ip,
            user_agent=metadata.user_agent,
            referer=metadata.referer,
        )

        try:
            self.db.add(click)
            self.db.execute(
                update(Link)
                .where(Link.id == link_id)
                .values(total_clicks=Link.total_clicks + 1)
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("Failed to record click for link %s", link_id)
            raise

        return click
