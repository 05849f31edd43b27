"""Shared fixtures: a fake generator in place of Gemini and an API client bound to a fresh session."""

from __future__ import annotations

import threading

import pytest
from fastapi.testclient import TestClient

from post_automator.config import Settings
from post_automator.main import app
from post_automator.models.schemas import Article, SocialPlatform
from post_automator.session import AppSession, get_session


class FakeGenerator:
    def __init__(self, text: str = "Check this out! #AI #Trends", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, SocialPlatform]] = []

    def generate(self, article: Article, platform: SocialPlatform) -> str:
        self.calls.append((article.url, platform))
        if self.error is not None:
            raise self.error
        return self.text


class GatedGenerator:
    """Blocks each platform's call until the test releases it."""

    def __init__(self) -> None:
        self.gates = {platform: threading.Event() for platform in SocialPlatform}
        self.errors: dict[SocialPlatform, Exception] = {}

    def release(self, platform: SocialPlatform) -> None:
        self.gates[platform].set()

    def generate(self, article: Article, platform: SocialPlatform) -> str:
        assert self.gates[platform].wait(timeout=5)
        if platform in self.errors:
            raise self.errors[platform]
        return f"{platform.value} post"


@pytest.fixture
def gated_generator() -> GatedGenerator:
    return GatedGenerator()


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def config() -> Settings:
    return Settings(
        gemini_api_key="test-key",
        share_destinations=[
            {"name": "acme", "platform": "LinkedIn", "url": "https://www.linkedin.com/company/acme/"},
        ],
    )


@pytest.fixture
def session(generator: FakeGenerator, config: Settings) -> AppSession:
    return AppSession(generator, config)


@pytest.fixture
def client(session: AppSession):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()
