from typing import Optional

from pydantic import BaseModel, Field

from linksly_app.schemas.base import CamelModel, UTCDateTime


class RequestMetadata(BaseModel):
    """
    What the redirect endpoint knows about the visitor.

    Recorded as-is on the Click row; geo and device fields are left for an
    enrichment step outside this service.
    """

    ip: Optional[str] = Field(None, description="Client IP address")
    user_agent: Optional[str] = Field(None, description="User agent string")
    referer: Optional[str] = Field(None, description="HTTP referer")

    model_config = {
        "json_schema_extra": {
            "example": {
                "ip": "192.168.1.1",
                "user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/120.0",
                "referer": "https://twitter.com",
            }
        }
    }


class ClickResponse(CamelModel):
    id: str
    link_id: str
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    referer: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    device: Optional[str] = None
    browser: Optional[str] = None
    os: Optional[str] = None
    created_at: UTCDateTime
