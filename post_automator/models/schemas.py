"""Pydantic schemas for articles, generation state and the API."""
from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field


class SocialPlatform(str, Enum):
    """Destination social networks."""

    TWITTER = "Twitter"
    LINKEDIN = "LinkedIn"
    FACEBOOK = "Facebook"
    THREADS = "Threads"


DEFAULT_PLATFORM = SocialPlatform.TWITTER


class GenerationStatus(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# ----- Domain -----
class Article(BaseModel):
    """A blog post to promote, keyed by its URL. Immutable once validated."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    summary: str | None = None
    image_url: str | None = Field(default=None, description="External cover image URL")
    image_base64: str | None = Field(default=None, description="Uploaded cover image, base64 encoded")
    image_mime_type: str | None = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_base64 or self.image_url)

    @property
    def cover_image_src(self) -> str:
        """What the browser renders: embedded image, external image, or a seeded placeholder."""
        if self.image_base64:
            return f"data:{self.image_mime_type or 'image/png'};base64,{self.image_base64}"
        if self.image_url:
            return self.image_url
        return f"https://picsum.photos/seed/{quote(self.title, safe='')}/1200/630"


class GenerationState(BaseModel):
    """Tracked status of the most recent generation attempt for one article."""

    model_config = ConfigDict(frozen=True)

    platform: SocialPlatform = DEFAULT_PLATFORM
    status: GenerationStatus = GenerationStatus.IDLE
    result_text: str | None = None
    error_message: str | None = None


# ----- API Request/Response -----
class ArticleOut(BaseModel):
    """Article plus its tracked generation state, for the article cards."""

    title: str
    url: str
    summary: str | None
    cover_image_src: str
    state: GenerationState

    @classmethod
    def build(cls, article: Article, state: GenerationState) -> "ArticleOut":
        return cls(
            title=article.title,
            url=article.url,
            summary=article.summary,
            cover_image_src=article.cover_image_src,
            state=state,
        )


class BatchOut(BaseModel):
    """Current batch. ``image_error`` is set when the article was accepted without its image."""

    articles: list[ArticleOut] = Field(default_factory=list)
    image_error: str | None = None


class SelectPlatformRequest(BaseModel):
    """Request body for PUT /articles/platform."""

    url: str
    platform: SocialPlatform


class GenerateRequest(BaseModel):
    """Request body for POST /generate."""

    url: str = Field(description="Key of the article to generate a post for")
    platform: SocialPlatform | None = Field(default=None, description="Defaults to the article's selected platform")


class GenerateResponse(BaseModel):
    """State after the request resolved. ``superseded`` means a newer request owns the state."""

    url: str
    state: GenerationState
    superseded: bool = False


class ShareTargetOut(BaseModel):
    """Where to send the generated text.

    kind is "link" (open ``url`` in a new tab) or "copy" (write ``text`` to the clipboard).
    When ``copy_text_first`` is set the client must copy ``text`` before navigating.
    """

    kind: str
    platform: SocialPlatform | None = None
    url: str | None = None
    text: str
    copy_text_first: bool = False


class ShareDestinationOut(BaseModel):
    name: str
    platform: SocialPlatform
    url: str
