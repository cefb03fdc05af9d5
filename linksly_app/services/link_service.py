import logging
import math
from datetime import datetime
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from linksly_app.config import settings
from linksly_app.exceptions import ConflictError, ExpiredError, NotFoundError, ValidationError
from linksly_app.models import Click, Link
from linksly_app.schemas.click import ClickResponse
from linksly_app.schemas.link import LinkDetail, LinkList, LinkResponse, Pagination
from linksly_app.services.short_code_factory import ShortCodeFactory
from linksly_app.services.short_code_strategies import ShortCodeStrategy
from linksly_app.utils import as_utc, normalize_url, utc_now

logger = logging.getLogger(__name__)


def _is_code_collision(exc: IntegrityError) -> bool:
    """True when the insert broke the short_code or custom_alias uniqueness"""
    detail = str(exc.orig)
    return "short_code" in detail or "custom_alias" in detail


class LinkService:
    """
    Link Service: create, resolve, list, get and delete short links.

    The database session is injected per request (see dependencies.py).
    Errors are raised as the domain exceptions in linksly_app.exceptions and
    turned into HTTP responses by the app's exception handlers.
    """

    def __init__(self, db: Session, short_code_strategy: Optional[ShortCodeStrategy] = None):
        """
        Initialize link service with dependencies.

        Args:
            db: Database session
            short_code_strategy: Code generator (default: configured strategy from factory)
        """
        self.db = db
        self.short_code_strategy = short_code_strategy or ShortCodeFactory.create_strategy()

    def create_link(
        self,
        original_url: str,
        custom_alias: Optional[str] = None,
        title: Optional[str] = None,
        description: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ) -> Link:
        """Create a new short link

        Note: Always creates a new link even if the target URL already exists,
        so different sources/campaigns for the same destination are tracked apart.

        Process:
        1. Format and validate the target URL
        2. Check the custom alias (length, not already taken)
        3. Insert; a uniqueness violation on a generated code is retried with
           a fresh code; other integrity errors propagate

        Returns the SQLAlchemy model instance - Pydantic will auto-serialize it!
        """
        formatted_url = normalize_url(original_url)

        alias = custom_alias.strip() if custom_alias else None
        if alias:
            if len(alias) < settings.min_alias_length:
                raise ValidationError(
                    f"Custom alias must be at least {settings.min_alias_length} characters"
                )
            existing = self.db.query(Link).filter(Link.custom_alias == alias).first()
            if existing:
                raise ConflictError("Custom alias already exists")
        else:
            alias = None

        attempts = 1 if alias else settings.max_retries
        for attempt in range(attempts):
            link = Link(
                original_url=formatted_url,
                short_code=alias or self.short_code_strategy.generate(),
                custom_alias=alias,
                title=title,
                description=description,
                expires_at=as_utc(expires_at),
                is_active=True,
                total_clicks=0,
            )
            self.db.add(link)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                if not _is_code_collision(exc):
                    logger.error("Could not store link for %s: %s", formatted_url, exc.orig)
                    raise
                logger.warning(
                    "Short code collision on %s (attempt %d/%d): %s",
                    link.short_code, attempt + 1, attempts, exc.orig,
                )
                continue

            self.db.refresh(link)
            logger.info("Created link %s -> %s", link.short_code, link.original_url)
            return link

        if alias:
            raise ConflictError("Custom alias already exists")
        raise ConflictError(
            f"Could not generate a unique short code after {attempts} attempts"
        )

    def resolve(self, code: str) -> Link:
        """
        Find the active link a redirect code points at.

        The code may be either a generated short code or a custom alias.

        Raises:
            NotFoundError: No active link matches
            ExpiredError: The link exists but its expiry has passed
        """
        link = (
            self.db.query(Link)
            .filter(
                or_(Link.short_code == code, Link.custom_alias == code),
                Link.is_active == True,
            )
            .order_by(Link.created_at.asc(), Link.id.asc())
            .first()
        )

        if not link:
            raise NotFoundError()

        if link.expires_at is not None and as_utc(link.expires_at) < utc_now():
            logger.info("Link %s expired at %s", link.short_code, link.expires_at)
            raise ExpiredError()

        return link

    def list_links(self, page: Optional[int] = None, page_size: Optional[int] = None) -> LinkList:
        """Get one page of links, newest first, with pagination info"""
        page = page if page and page > 0 else 1
        page_size = page_size if page_size and page_size > 0 else settings.default_page_size
        page_size = min(page_size, settings.max_page_size)

        links = (
            self.db.query(Link)
            .order_by(Link.created_at.desc(), Link.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        total = self.db.query(Link).count()

        return LinkList(
            links=[LinkResponse.model_validate(link) for link in links],
            pagination=Pagination(
                page=page,
                limit=page_size,
                total=total,
                pages=math.ceil(total / page_size),
            ),
        )

    def get_link(self, link_id: str) -> LinkDetail:
        """Get a link by id together with its most recent clicks"""
        link = self.get_link_by_id(link_id)

        recent_clicks = (
            self.db.query(Click)
            .filter(Click.link_id == link.id)
            .order_by(Click.created_at.desc(), Click.id.desc())
            .limit(settings.recent_clicks_limit)
            .all()
        )

        return LinkDetail(
            **LinkResponse.model_validate(link).model_dump(exclude={"short_url"}),
            clicks=[ClickResponse.model_validate(click) for click in recent_clicks],
        )

    def delete_link(self, link_id: str) -> None:
        """Delete a link; its clicks go with it (cascade)"""
        link = self.get_link_by_id(link_id)
        short_code = link.short_code
        self.db.delete(link)
        self.db.commit()
        logger.info("Deleted link %s", short_code)

    def get_link_by_id(self, link_id: str) -> Link:
        """Get a link by id without its clicks"""
        link = self.db.get(Link, link_id)
        if not link:
            raise NotFoundError()
        return link

