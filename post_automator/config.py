"""Application configuration from environment."""
from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from post_automator.models.schemas import SocialPlatform

# Project root (parent of post_automator/); .env is loaded from here so it works regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Named destinations only make sense where the share intent cannot carry text
_DESTINATION_PLATFORMS = (SocialPlatform.LINKEDIN, SocialPlatform.FACEBOOK)


class ShareDestination(BaseModel):
    """A page the user posts to by pasting copied text, e.g. a company page."""

    name: str
    platform: SocialPlatform
    url: str

    @field_validator("platform")
    @classmethod
    def _platform_supported(cls, value: SocialPlatform) -> SocialPlatform:
        if value not in _DESTINATION_PLATFORMS:
            raise ValueError(f"platform must be one of {', '.join(p.value for p in _DESTINATION_PLATFORMS)}")
        return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini
    gemini_api_key: str = ""
    gemini_text_model: str = "gemini-2.5-flash"

    # Sharing, e.g. SHARE_DESTINATIONS='[{"name": "acme", "platform": "LinkedIn", "url": "https://www.linkedin.com/company/acme/"}]'
    share_destinations: list[ShareDestination] = []

    # App
    log_level: str = "INFO"

    def destination(self, name: str) -> ShareDestination | None:
        for dest in self.share_destinations:
            if dest.name == name:
                return dest
        return None


settings = Settings()
