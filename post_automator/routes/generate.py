"""POST /generate and per-article generation state."""
from fastapi import APIRouter, Depends, HTTPException, Query

from post_automator.errors import GenerationError
from post_automator.models.schemas import GenerateRequest, GenerateResponse, GenerationState
from post_automator.session import AppSession, get_session
from post_automator.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("", response_model=GenerateResponse)
async def generate_post(
    body: GenerateRequest,
    session: AppSession = Depends(get_session),
):
    """Generate a post for one article. A newer request for the same article wins."""
    try:
        state, applied = await session.generate(body.url, body.platform)
    except KeyError:
        raise HTTPException(status_code=404, detail="Article not found")
    except GenerationError as e:
        # Cause already logged by the gateway; the client only sees the generic message
        raise HTTPException(status_code=502, detail=e.message) from e
    return GenerateResponse(url=body.url, state=state, superseded=not applied)


@router.get("/state", response_model=GenerationState)
async def get_state(
    url: str = Query(..., description="Article URL"),
    session: AppSession = Depends(get_session),
):
    try:
        return session.state(url)
    except KeyError:
        raise HTTPException(status_code=404, detail="Article not found")


@router.delete("", response_model=GenerationState)
async def reset_state(
    url: str = Query(..., description="Article URL"),
    session: AppSession = Depends(get_session),
):
    """Dismiss the generated post (or error) and return to idle."""
    try:
        return session.reset(url)
    except KeyError:
        raise HTTPException(status_code=404, detail="Article not found")
