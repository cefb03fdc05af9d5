from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from linksly_app.config import settings
from linksly_app.schemas.link import LinkCreate, LinkDetail, LinkList, LinkResponse, QRCodeResponse
from linksly_app.services.link_service import LinkService
from linksly_app.services.qr_code import generate_qr_data_uri
from linksly_app.dependencies import get_link_service

router = APIRouter(prefix="/links", tags=["links"])


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Query value as an int, or None when it is missing or not a number"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
def create_link(
    link_data: LinkCreate,
    link_service: LinkService = Depends(get_link_service)
):
    """Create a new short link"""
    return link_service.create_link(
        original_url=link_data.original_url,
        custom_alias=link_data.custom_alias,
        title=link_data.title,
        description=link_data.description,
        expires_at=link_data.expires_at,
    )


@router.get("", response_model=LinkList)
def list_links(
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(None, description="Links per page"),
    link_service: LinkService = Depends(get_link_service)
):
    """List links, newest first"""
    return link_service.list_links(page=_parse_int(page), page_size=_parse_int(limit))


@router.get("/{link_id}", response_model=LinkDetail)
def get_link(
    link_id: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Get a link with its most recent clicks"""
    return link_service.get_link(link_id)


@router.delete("/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_link(
    link_id: str,
    link_service: LinkService = Depends(get_link_service)
):
    """Delete a link and its recorded clicks"""
    link_service.delete_link(link_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{link_id}/qr", response_model=QRCodeResponse)
def get_link_qr_code(
    link_id: str,
    link_service: LinkService = Depends(get_link_service)
):
    """QR code for the link's public short URL"""
    link = link_service.get_link_by_id(link_id)
    short_url = f"{settings.base_url}/s/{link.short_code}"
    return QRCodeResponse(qr_code=generate_qr_data_uri(short_url))
