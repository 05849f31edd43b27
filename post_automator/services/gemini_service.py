"""Gemini API: social post text generation."""
from typing import Any

from post_automator.config import settings
from post_automator.errors import ConfigurationError, GenerationError
from post_automator.models.schemas import Article, SocialPlatform
from post_automator.services.prompts import build_prompt
from post_automator.utils.logging import get_logger

logger = get_logger(__name__)

# Fixed sampling; not user-tunable
TEMPERATURE = 0.7
TOP_P = 0.95


def _create_client(api_key: str) -> Any:
    """Return Google GenAI client. Uses google-genai SDK."""
    from google import genai

    return genai.Client(api_key=api_key)


class GeminiGateway:
    """One generate_content call per request. No retries: failures go straight to the caller."""

    def __init__(self, api_key: str | None = None, model: str | None = None, client: Any = None):
        api_key = settings.gemini_api_key if api_key is None else api_key
        if not api_key:
            raise ConfigurationError()
        self.model = model or settings.gemini_text_model
        self._client = client if client is not None else _create_client(api_key)

    def generate(self, article: Article, platform: SocialPlatform) -> str:
        """Generate post text for ``article`` on ``platform``; raises GenerationError."""
        prompt = build_prompt(article, platform)
        try:
            from google.genai import types

            response = self._client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(temperature=TEMPERATURE, top_p=TOP_P),
            )
            text = (response.text or "").strip()
            if not text:
                raise ValueError("Gemini response contained no text")
        except Exception as e:
            logger.exception("gemini_generation_failed", url=article.url, platform=platform.value, error=str(e))
            raise GenerationError() from e
        return text
