"""Tests for share intents, the copy acknowledgement and named destinations."""

from __future__ import annotations

import asyncio
from urllib.parse import parse_qs, urlsplit

import pytest

from post_automator.config import ShareDestination
from post_automator.errors import ClipboardError
from post_automator.models.schemas import SocialPlatform
from post_automator.services.share_links import (
    COPY_ACK_SECONDS,
    CopyAction,
    CopyFeedback,
    ShareLink,
    build_copy_action,
    build_share_target,
    open_named_destination,
)

URL = "https://ex.com/a"
TEXT = "Check this out! #AI #Trends"


def test_twitter_intent_percent_encodes_text_and_url() -> None:
    target = build_share_target(SocialPlatform.TWITTER, URL, TEXT)

    assert isinstance(target, ShareLink)
    assert target.url == (
        "https://twitter.com/intent/tweet"
        "?text=Check%20this%20out!%20%23AI%20%23Trends&url=https%3A%2F%2Fex.com%2Fa"
    )
    assert not target.copy_text_first


def test_facebook_sharer_has_url_and_quote() -> None:
    target = build_share_target(SocialPlatform.FACEBOOK, URL, TEXT)

    parts = urlsplit(target.url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://www.facebook.com/sharer/sharer.php"
    assert parse_qs(parts.query) == {"u": [URL], "quote": [TEXT]}


@pytest.mark.parametrize("text", [TEXT, "", None])
def test_linkedin_embeds_only_the_url(text) -> None:
    target = build_share_target(SocialPlatform.LINKEDIN, URL, text)

    assert target.url == "https://www.linkedin.com/sharing/share-offsite/?url=https%3A%2F%2Fex.com%2Fa"
    assert "Check" not in target.url
    assert target.copy_text_first


def test_threads_intent_appends_url_to_text() -> None:
    target = build_share_target(SocialPlatform.THREADS, URL, TEXT)

    query = parse_qs(urlsplit(target.url).query)
    assert target.url.startswith("https://www.threads.net/intent/post?text=")
    assert query == {"text": [f"{TEXT}\n\n{URL}"]}
    assert "%0A%0A" in target.url


def test_copy_action_is_verbatim() -> None:
    text = "  Line one\nLine two #tag  "

    assert build_copy_action(text) == CopyAction(text)
    assert build_share_target(None, URL, text) == CopyAction(text)


def test_copy_acknowledgement_window_is_two_seconds() -> None:
    assert COPY_ACK_SECONDS == 2.0


def test_copy_acknowledgement_reverts_after_window() -> None:
    written: list[str] = []

    async def clipboard(text: str) -> None:
        written.append(text)

    async def scenario():
        feedback = CopyFeedback(clipboard, reset_after=0.05)
        await feedback.copy(CopyAction(TEXT))
        copied_now = feedback.copied
        await asyncio.sleep(0.15)
        return copied_now, feedback.copied

    copied_now, copied_later = asyncio.run(scenario())

    assert written == [TEXT]
    assert copied_now is True
    assert copied_later is False


def test_repeated_copy_restarts_window() -> None:
    async def clipboard(text: str) -> None:
        return None

    async def scenario():
        feedback = CopyFeedback(clipboard, reset_after=0.1)
        await feedback.copy(CopyAction(TEXT))
        await asyncio.sleep(0.06)
        await feedback.copy(CopyAction(TEXT))
        await asyncio.sleep(0.06)
        still = feedback.copied
        await asyncio.sleep(0.1)
        return still, feedback.copied

    still, later = asyncio.run(scenario())

    assert still is True
    assert later is False


def test_failed_copy_raises_and_leaves_acknowledgement_off() -> None:
    async def clipboard(text: str) -> None:
        raise PermissionError("clipboard denied")

    async def scenario():
        feedback = CopyFeedback(clipboard)
        with pytest.raises(ClipboardError):
            await feedback.copy(CopyAction(TEXT))
        return feedback.copied

    assert asyncio.run(scenario()) is False


DESTINATION = ShareDestination(name="acme", platform="LinkedIn", url="https://www.linkedin.com/company/acme/")


def test_named_destination_copies_before_opening() -> None:
    events: list[tuple[str, str]] = []

    async def clipboard(text: str) -> None:
        events.append(("copy", text))

    async def opener(url: str) -> None:
        events.append(("open", url))

    link = asyncio.run(open_named_destination(DESTINATION, TEXT, clipboard, opener))

    assert events == [("copy", TEXT), ("open", "https://www.linkedin.com/company/acme/")]
    assert link.platform is SocialPlatform.LINKEDIN
    assert link.copy_text_first


def test_named_destination_does_not_open_when_copy_fails() -> None:
    opened: list[str] = []

    async def clipboard(text: str) -> None:
        raise RuntimeError("no clipboard")

    async def opener(url: str) -> None:
        opened.append(url)

    with pytest.raises(ClipboardError):
        asyncio.run(open_named_destination(DESTINATION, TEXT, clipboard, opener))

    assert opened == []


def test_destination_platform_is_limited() -> None:
    with pytest.raises(ValueError):
        ShareDestination(name="x", platform="Twitter", url="https://twitter.com/x")


def test_reserved_characters_follow_uri_component_encoding() -> None:
    text = "Wow (really)! *Read* it's new"

    target = build_share_target(SocialPlatform.TWITTER, URL, text)

    assert "text=Wow%20(really)!%20*Read*%20it's%20new&" in target.url


def test_destination_platform_is_the_enum() -> None:
    assert DESTINATION.platform is SocialPlatform.LINKEDIN
