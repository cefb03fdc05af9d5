from datetime import datetime, timezone
from typing import Optional

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from linksly_app.exceptions import ValidationError

_http_url = TypeAdapter(HttpUrl)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Return `dt` in UTC, reading naive values (as SQLite hands them back) as UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_url(url: str) -> str:
    """Prefix scheme-less input with https://"""
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        return f"https://{url}"
    return url


def normalize_url(url: str) -> str:
    """
    Format and validate a user-supplied target URL.

    The returned string is the formatted input, not pydantic's re-serialized
    form, so "example.com" is stored as "https://example.com" without a
    trailing slash.

    Raises:
        ValidationError: If the result is not an absolute http(s) URL
    """
    formatted = format_url(url or "")
    try:
        parsed = _http_url.validate_python(formatted)
    except PydanticValidationError:
        raise ValidationError("Invalid URL")
    if not parsed.host:
        raise ValidationError("Invalid URL")
    return formatted
