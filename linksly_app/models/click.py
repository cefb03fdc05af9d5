from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from linksly_app.database.connection import Base
from linksly_app.models.link import generate_id
from linksly_app.utils import utc_now


class Click(Base):
    """One recorded visit through the redirect path."""
    __tablename__ = "clicks"

    id = Column(String(32), primary_key=True, default=generate_id)
    link_id = Column(
        String(32),
        ForeignKey("links.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    ip = Column(String(45), nullable=True)  # IPv4 or IPv6
    user_agent = Column(String(512), nullable=True)
    referer = Column(String(2048), nullable=True)

    # Enrichment fields, filled by an external step if at all
    country = Column(String(64), nullable=True)
    city = Column(String(128), nullable=True)
    device = Column(String(64), nullable=True)
    browser = Column(String(64), nullable=True)
    os = Column(String(64), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)

    link = relationship("Link", back_populates="clicks")

    def __repr__(self):
        return f"<Click {self.id} for link {self.link_id}>"
