"""Pydantic models."""
from post_automator.models.schemas import (
    DEFAULT_PLATFORM,
    Article,
    ArticleOut,
    BatchOut,
    GenerateRequest,
    GenerateResponse,
    GenerationState,
    GenerationStatus,
    SelectPlatformRequest,
    ShareDestinationOut,
    ShareTargetOut,
    SocialPlatform,
)

__all__ = [
    "DEFAULT_PLATFORM",
    "Article",
    "ArticleOut",
    "BatchOut",
    "GenerateRequest",
    "GenerateResponse",
    "GenerationState",
    "GenerationStatus",
    "SelectPlatformRequest",
    "ShareDestinationOut",
    "ShareTargetOut",
    "SocialPlatform",
]
