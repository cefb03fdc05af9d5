from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from linksly_app.schemas.click import RequestMetadata
from linksly_app.services.click_recorder import ClickRecorder
from linksly_app.services.link_service import LinkService
from linksly_app.dependencies import get_click_recorder, get_link_service

router = APIRouter(tags=["redirect"])


@router.get("/s/{code}")
def redirect_to_original_url(
    code: str,
    request: Request,
    link_service: LinkService = Depends(get_link_service),
    click_recorder: ClickRecorder = Depends(get_click_recorder)
):
    """
    Redirect to the original URL.

    Flow:
    1. Resolve the code (short code or custom alias) to an active link;
       404 if there is none, 410 if it has expired
    2. Record the click and bump the link's counter in one transaction
    3. Redirect with 302
    """
    link = link_service.resolve(code)
    original_url = link.original_url

    click_recorder.record(
        link.id,
        RequestMetadata(
            ip=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
            referer=request.headers.get("referer"),
        ),
    )

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
