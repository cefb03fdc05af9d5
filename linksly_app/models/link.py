import uuid

from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean
from sqlalchemy.orm import relationship

from linksly_app.database.connection import Base
from linksly_app.utils import utc_now


def generate_id() -> str:
    return uuid.uuid4().hex


class Link(Base):
    """
    A shortened link.

    `total_clicks` is a denormalized counter kept in step with the rows in
    `clicks` by the click recorder. Expiry is evaluated at read time; nothing
    ever deactivates or deletes a link automatically.
    """
    __tablename__ = "links"

    id = Column(String(32), primary_key=True, default=generate_id)
    original_url = Column(String(2048), nullable=False)
    # Aliased links store the alias here too, so this constraint spans both namespaces
    short_code = Column(String(64), unique=True, nullable=False, index=True)
    custom_alias = Column(String(64), unique=True, nullable=True, index=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    total_clicks = Column(Integer, default=0, nullable=False)

    clicks = relationship(
        "Click",
        back_populates="link",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Link {self.short_code} -> {self.original_url}>"
