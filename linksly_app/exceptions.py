"""
Domain errors raised by the service layer.

Each error carries the HTTP status the API answers with and a message that is
safe to show to the client. The handlers in `main.py` turn them into
`{"error": message}` responses.
"""

from typing import Optional

from fastapi import status


class LinkServiceError(Exception):
    """Base class for expected, client-facing failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(LinkServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input data"


class ConflictError(LinkServiceError):
    # Answered as 400, not 409
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Custom alias already exists"


class NotFoundError(LinkServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Link not found"


class ExpiredError(LinkServiceError):
    status_code = status.HTTP_410_GONE
    default_message = "Link has expired"
