"""Share intents, copy actions and named destinations for generated posts."""
from fastapi import APIRouter, Depends, HTTPException, Query

from post_automator.errors import NothingToShareError
from post_automator.models.schemas import ShareDestinationOut, ShareTargetOut
from post_automator.services.share_links import CopyAction, ShareLink
from post_automator.session import AppSession, get_session

router = APIRouter(prefix="/share", tags=["share"])


def _target_out(target: ShareLink | CopyAction) -> ShareTargetOut:
    if isinstance(target, CopyAction):
        return ShareTargetOut(kind="copy", text=target.text)
    return ShareTargetOut(
        kind="link",
        platform=target.platform,
        url=target.url,
        text=target.text,
        copy_text_first=target.copy_text_first,
    )


@router.get("", response_model=ShareTargetOut)
async def share_target(
    url: str = Query(..., description="Article URL"),
    copy: bool = Query(default=False, description="Only copy the text, no share link"),
    session: AppSession = Depends(get_session),
):
    """Share link for the article's platform and generated text."""
    try:
        return _target_out(session.share_target(url, copy_only=copy))
    except KeyError:
        raise HTTPException(status_code=404, detail="Article not found")
    except NothingToShareError as e:
        raise HTTPException(status_code=409, detail=e.message) from e


@router.get("/destinations", response_model=list[ShareDestinationOut])
async def list_destinations(session: AppSession = Depends(get_session)):
    """Configured pages (e.g. a company page) that take pasted text."""
    return [
        ShareDestinationOut(name=d.name, platform=d.platform, url=d.url)
        for d in session.settings.share_destinations
    ]


@router.get("/destinations/{name}", response_model=ShareTargetOut)
async def destination_target(
    name: str,
    url: str = Query(..., description="Article URL"),
    session: AppSession = Depends(get_session),
):
    """Destination link; the client copies ``text`` first and only navigates if that worked."""
    try:
        return _target_out(session.destination_target(name, url))
    except KeyError:
        raise HTTPException(status_code=404, detail="Destination or article not found")
    except NothingToShareError as e:
        raise HTTPException(status_code=409, detail=e.message) from e
