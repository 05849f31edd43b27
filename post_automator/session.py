"""Application session: owns the article batch and the generation state map."""
import asyncio
from typing import Protocol

from post_automator.config import Settings, settings as default_settings
from post_automator.errors import GenerationError, NothingToShareError
from post_automator.models.schemas import (
    Article,
    ArticleOut,
    GenerationState,
    SocialPlatform,
)
from post_automator.services.generation_tracker import GenerationTracker
from post_automator.services.share_links import (
    CopyAction,
    ShareLink,
    build_share_target,
    destination_target,
)
from post_automator.utils.logging import get_logger

logger = get_logger(__name__)


class Generator(Protocol):
    def generate(self, article: Article, platform: SocialPlatform) -> str: ...


_session: "AppSession | None" = None


def set_session(session: "AppSession | None") -> None:
    global _session
    _session = session


def get_session() -> "AppSession":
    """FastAPI dependency; the session is created in the app lifespan."""
    if _session is None:
        raise RuntimeError("Application session not initialised")
    return _session


class AppSession:
    """Wires validated articles, the tracker and the generator together.

    Routes call into this object only; nothing else touches the tracker.
    """

    def __init__(self, generator: Generator, config: Settings | None = None):
        self.generator = generator
        self.settings = config or default_settings
        self.tracker = GenerationTracker()
        self._articles: dict[str, Article] = {}

    # ----- batch -----
    def load_articles(self, articles: list[Article]) -> None:
        """Replace the batch. Previous articles and their states are dropped."""
        self._articles = {}
        self.tracker.clear()
        for article in articles:
            self._articles[article.url] = article
            self.tracker.register(article.url)
        logger.info("article_batch_loaded", count=len(self._articles))

    def clear(self) -> None:
        self._articles = {}
        self.tracker.clear()
        logger.info("article_batch_cleared")

    def remove_article(self, url: str) -> None:
        """Drop one article; a request still in flight for it is discarded on arrival."""
        del self._articles[url]
        self.tracker.remove(url)
        logger.info("article_removed", url=url)

    def articles(self) -> list[Article]:
        return list(self._articles.values())

    def article(self, url: str) -> Article:
        return self._articles[url]

    def cards(self) -> list[ArticleOut]:
        return [ArticleOut.build(a, self.tracker.get(a.url)) for a in self._articles.values()]

    # ----- generation -----
    def state(self, url: str) -> GenerationState:
        return self.tracker.get(url)

    def select_platform(self, url: str, platform: SocialPlatform) -> GenerationState:
        self.article(url)
        return self.tracker.select_platform(url, platform)

    def reset(self, url: str) -> GenerationState:
        self.article(url)
        return self.tracker.reset(url)

    async def generate(self, url: str, platform: SocialPlatform | None = None) -> tuple[GenerationState, bool]:
        """Run one generation. Returns (state, applied); applied is False when a newer request superseded this one.

        Raises GenerationError when this request failed and its failure was recorded.
        """
        article = self.article(url)
        platform = platform or self.tracker.get(url).platform
        ticket = self.tracker.start_generation(url, platform)
        logger.info("generation_started", url=url, platform=platform.value, ticket=ticket)
        try:
            # The SDK client is sync; run in thread to avoid blocking the loop
            text = await asyncio.to_thread(self.generator.generate, article, platform)
        except GenerationError as e:
            applied = self.tracker.on_failure(url, ticket, e.message)
            if applied:
                raise
            return self._current(url), False
        except Exception as e:
            logger.exception("generation_unexpected_error", url=url, ticket=ticket, error=str(e))
            applied = self.tracker.on_failure(url, ticket, GenerationError.default_message)
            if applied:
                raise GenerationError() from e
            return self._current(url), False
        applied = self.tracker.on_success(url, ticket, text)
        logger.info("generation_finished", url=url, ticket=ticket, applied=applied)
        return self._current(url), applied

    def _current(self, url: str) -> GenerationState:
        # The article may have been removed while the request was in flight
        if url in self.tracker:
            return self.tracker.get(url)
        return GenerationState()

    # ----- sharing -----
    def share_target(self, url: str, copy_only: bool = False) -> ShareLink | CopyAction:
        state = self.tracker.get(url)
        if not state.result_text:
            raise NothingToShareError()
        return build_share_target(None if copy_only else state.platform, url, state.result_text)

    def destination_target(self, name: str, url: str) -> ShareLink:
        destination = self.settings.destination(name)
        if destination is None:
            raise KeyError(name)
        state = self.tracker.get(url)
        if not state.result_text:
            raise NothingToShareError()
        return destination_target(destination, state.result_text)
