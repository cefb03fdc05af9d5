from typing import List, Optional

from pydantic import Field, computed_field

from linksly_app.config import settings
from linksly_app.schemas.base import CamelModel, UTCDateTime
from linksly_app.schemas.click import ClickResponse


class LinkCreate(CamelModel):
    """Request body for POST /api/links.

    URL formatting, alias length and uniqueness are checked by LinkService,
    so the same rules apply to callers that bypass HTTP.
    """
    original_url: str = Field(..., description="The URL to shorten; https:// is assumed when no scheme is given")
    custom_alias: Optional[str] = Field(None, max_length=64, description="Optional custom alias (min 3 characters)")
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    expires_at: Optional[UTCDateTime] = Field(None, description="Link stops redirecting after this moment")


class LinkResponse(CamelModel):
    """Response schema that serializes the SQLAlchemy Link model"""
    id: str
    original_url: str
    short_code: str
    custom_alias: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    created_at: UTCDateTime
    updated_at: Optional[UTCDateTime] = None
    expires_at: Optional[UTCDateTime] = None
    is_active: bool
    total_clicks: int

    @computed_field(alias="shortUrl")
    @property
    def short_url(self) -> str:
        """Computed field - public redirect URL for this link"""
        return f"{settings.base_url}/s/{self.short_code}"


class LinkDetail(LinkResponse):
    """Link with its most recent clicks, newest first"""
    clicks: List[ClickResponse] = []


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class LinkList(CamelModel):
    links: List[LinkResponse]
    pagination: Pagination


class QRCodeResponse(CamelModel):
    qr_code: str = Field(..., description="PNG image as a data URI")
