"""Article batch: paste a single article, upload a JSON list, select platforms, clear."""
from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile

from post_automator.errors import ImageReadError, ValidationError
from post_automator.models.schemas import BatchOut, GenerationState, SelectPlatformRequest
from post_automator.services.article_validator import (
    attach_image,
    parse_json_text,
    read_image_base64,
    read_json_upload,
    validate_article,
)
from post_automator.session import AppSession, get_session
from post_automator.utils.logging import get_logger

router = APIRouter(prefix="/articles", tags=["articles"])
logger = get_logger(__name__)


@router.get("", response_model=BatchOut)
async def list_articles(session: AppSession = Depends(get_session)):
    """Current batch with per-article generation state."""
    return BatchOut(articles=session.cards())


@router.post("", response_model=BatchOut)
async def submit_article(
    article_json: str = Form(..., description='{"title": ..., "url": ..., "summary": ...}'),
    image: UploadFile | None = File(default=None),
    session: AppSession = Depends(get_session),
):
    """Replace the batch with one pasted article and an optional cover image."""
    try:
        article = validate_article(parse_json_text(article_json))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message) from e

    image_error = None
    if image is not None and image.filename:
        try:
            encoded, mime = await read_image_base64(image)
            article = attach_image(article, encoded, mime)
        except ImageReadError as e:
            # The JSON fields still stand; only the image is dropped
            logger.warning("article_image_skipped", url=article.url, error=e.message)
            image_error = e.message

    session.load_articles([article])
    return BatchOut(articles=session.cards(), image_error=image_error)


@router.post("/upload", response_model=BatchOut)
async def upload_articles(
    file: UploadFile = File(...),
    session: AppSession = Depends(get_session),
):
    """Replace the batch with the articles in an uploaded .json file."""
    raw = await file.read()
    try:
        articles = read_json_upload(file.filename, file.content_type, raw)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    session.load_articles(articles)
    return BatchOut(articles=session.cards())


@router.delete("", response_model=BatchOut)
async def clear_articles(session: AppSession = Depends(get_session)):
    session.clear()
    return BatchOut()


@router.delete("/item", response_model=BatchOut)
async def remove_article(
    url: str = Query(..., description="Article URL"),
    session: AppSession = Depends(get_session),
):
    """Remove one article from the batch."""
    try:
        session.remove_article(url)
    except KeyError:
        raise HTTPException(status_code=404, detail="Article not found")
    return BatchOut(articles=session.cards())


@router.put("/platform", response_model=GenerationState)
async def select_platform(
    body: SelectPlatformRequest,
    session: AppSession = Depends(get_session),
):
    """Select the platform for an article. Does not start a generation."""
    try:
        return session.select_platform(body.url, body.platform)
    except KeyError:
        raise HTTPException(status_code=404, detail="Article not found")
