"""Turn untrusted JSON and uploads into Article records."""
import base64
import json
from typing import Any, Protocol

from post_automator.errors import ImageReadError, ValidationError
from post_automator.models.schemas import Article
from post_automator.utils.helpers import blank_to_none, media_type, safe_decode
from post_automator.utils.logging import get_logger

logger = get_logger(__name__)

JSON_MEDIA_TYPE = "application/json"


class Upload(Protocol):
    """The slice of starlette's UploadFile the image reader needs."""

    filename: str | None
    content_type: str | None

    async def read(self) -> bytes: ...


def parse_json_text(text: str | None) -> Any:
    """Parse pasted JSON; empty input and decoder errors become ValidationError."""
    if not text or not text.strip():
        raise ValidationError("JSON input cannot be empty.")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Failed to parse JSON: {e}") from e


def _required_string(data: dict, field: str, where: str) -> str:
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{where}"{field}" must be a non-empty string.')
    return value


def _optional_string(data: dict, field: str, where: str) -> str | None:
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{where}"{field}" must be a string.')
    return blank_to_none(value)


def _article_from(data: Any, where: str = "", allow_image_url: bool = False) -> Article:
    if not isinstance(data, dict):
        raise ValidationError(f"{where}Expected an object with \"title\" and \"url\" properties.")
    return Article(
        title=_required_string(data, "title", where),
        url=_required_string(data, "url", where),
        summary=_optional_string(data, "summary", where),
        image_url=_optional_string(data, "imageUrl", where) if allow_image_url else None,
    )


def validate_article(data: Any) -> Article:
    """Validate a single article object. Image fields in the JSON are ignored."""
    return _article_from(data)


def dedupe_articles(articles: list[Article]) -> list[Article]:
    """One article per URL: first-seen position, last-seen value."""
    by_url: dict[str, Article] = {}
    for article in articles:
        # Reassigning an existing key keeps its insertion position
        by_url[article.url] = article
    return list(by_url.values())


def validate_batch(data: Any) -> list[Article]:
    """Validate an article list. One bad entry rejects the whole batch."""
    if not isinstance(data, list):
        raise ValidationError(
            'Invalid JSON structure. Expected an array of objects with "title" and "url" properties.'
        )
    articles = [
        _article_from(item, where=f"Item {index}: ", allow_image_url=True)
        for index, item in enumerate(data, start=1)
    ]
    unique = dedupe_articles(articles)
    if len(unique) != len(articles):
        logger.info("article_batch_deduplicated", received=len(articles), kept=len(unique))
    return unique


def read_json_upload(filename: str | None, content_type: str | None, raw: bytes) -> list[Article]:
    """Validate an uploaded .json file holding an article array."""
    if media_type(content_type) != JSON_MEDIA_TYPE:
        logger.info("article_upload_rejected", filename=filename, content_type=content_type)
        raise ValidationError("Please upload a valid JSON file.")
    text = safe_decode(raw)
    if text is None:
        raise ValidationError("Failed to read the file.")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Failed to parse JSON file: {e}") from e
    return validate_batch(data)


async def read_image_base64(upload: Upload) -> tuple[str, str]:
    """Read a cover image upload. Returns (base64 text, mime type)."""
    mime = media_type(upload.content_type)
    if not mime.startswith("image/"):
        raise ImageReadError("Failed to read the image file.")
    try:
        raw = await upload.read()
    except OSError as e:
        logger.warning("image_read_failed", filename=upload.filename, error=str(e))
        raise ImageReadError("Failed to read the image file.") from e
    if not raw:
        raise ImageReadError("Could not convert file to base64.")
    return base64.b64encode(raw).decode("ascii"), mime


def attach_image(article: Article, image_base64: str, mime_type: str) -> Article:
    return article.model_copy(update={"image_base64": image_base64, "image_mime_type": mime_type, "image_url": None})
