"""Share intents and clipboard actions for generated posts.

CopyFeedback and open_named_destination model the browser-side copy rules
(acknowledgement window, copy before navigating) against injected callables.
"""
import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable
from urllib.parse import quote, urlencode

from post_automator.config import ShareDestination
from post_automator.errors import ClipboardError
from post_automator.models.schemas import SocialPlatform
from post_automator.utils.logging import get_logger

logger = get_logger(__name__)

TWITTER_INTENT_URL = "https://twitter.com/intent/tweet"
FACEBOOK_SHARER_URL = "https://www.facebook.com/sharer/sharer.php"
LINKEDIN_SHARE_URL = "https://www.linkedin.com/sharing/share-offsite/"
THREADS_INTENT_URL = "https://www.threads.net/intent/post"

COPY_ACK_SECONDS = 2.0

ClipboardWriter = Callable[[str], Awaitable[None]]
Opener = Callable[[str], Awaitable[None]]


@dataclass(frozen=True)
class ShareLink:
    """Open ``url`` in a new browsing context. With copy_text_first, copy ``text`` before navigating."""

    platform: SocialPlatform
    url: str
    text: str
    copy_text_first: bool = False


@dataclass(frozen=True)
class CopyAction:
    """Write ``text`` verbatim to the clipboard."""

    text: str


# Same reserved set as encodeURIComponent
URI_COMPONENT_SAFE = "!*'()"


def _quote_component(value: str, safe: str = "", encoding: str | None = None, errors: str | None = None) -> str:
    return quote(value, safe=URI_COMPONENT_SAFE, encoding=encoding, errors=errors)


def _with_query(base: str, params: dict[str, str]) -> str:
    return f"{base}?{urlencode(params, quote_via=_quote_component)}"


def _twitter(article_url: str, text: str) -> ShareLink:
    return ShareLink(SocialPlatform.TWITTER, _with_query(TWITTER_INTENT_URL, {"text": text, "url": article_url}), text)


def _facebook(article_url: str, text: str) -> ShareLink:
    return ShareLink(SocialPlatform.FACEBOOK, _with_query(FACEBOOK_SHARER_URL, {"u": article_url, "quote": text}), text)


def _linkedin(article_url: str, text: str) -> ShareLink:
    # share-offsite ignores prefilled text, so the user pastes it
    return ShareLink(
        SocialPlatform.LINKEDIN,
        _with_query(LINKEDIN_SHARE_URL, {"url": article_url}),
        text,
        copy_text_first=True,
    )


def _threads(article_url: str, text: str) -> ShareLink:
    return ShareLink(SocialPlatform.THREADS, _with_query(THREADS_INTENT_URL, {"text": f"{text}\n\n{article_url}"}), text)


_BUILDERS: dict[SocialPlatform, Callable[[str, str], ShareLink]] = {
    SocialPlatform.TWITTER: _twitter,
    SocialPlatform.FACEBOOK: _facebook,
    SocialPlatform.LINKEDIN: _linkedin,
    SocialPlatform.THREADS: _threads,
}

_missing = set(SocialPlatform) - set(_BUILDERS)
if _missing:
    raise RuntimeError(f"No share builder for: {sorted(p.value for p in _missing)}")


def build_share_target(
    platform: SocialPlatform | None, article_url: str, generated_text: str | None
) -> ShareLink | CopyAction:
    """Share link for ``platform``, or a plain copy action when no platform is given."""
    text = generated_text or ""
    if platform is None:
        return build_copy_action(text)
    return _BUILDERS[platform](article_url, text)


def build_copy_action(generated_text: str) -> CopyAction:
    return CopyAction(generated_text)


class CopyFeedback:
    """The "Copied!" acknowledgement: set by a successful copy, cleared after a fixed window."""

    def __init__(self, clipboard: ClipboardWriter, reset_after: float = COPY_ACK_SECONDS):
        self._clipboard = clipboard
        self._reset_after = reset_after
        self._reset_handle: asyncio.TimerHandle | None = None
        self.copied = False

    async def copy(self, action: CopyAction) -> None:
        await _write_clipboard(self._clipboard, action.text)
        self.copied = True
        if self._reset_handle is not None:
            self._reset_handle.cancel()
        self._reset_handle = asyncio.get_running_loop().call_later(self._reset_after, self._clear)

    def _clear(self) -> None:
        self.copied = False
        self._reset_handle = None


async def _write_clipboard(clipboard: ClipboardWriter, text: str) -> None:
    try:
        await clipboard(text)
    except Exception as e:
        logger.warning("clipboard_write_failed", error=str(e))
        raise ClipboardError() from e


def destination_target(destination: ShareDestination, generated_text: str) -> ShareLink:
    """Named destinations always need the text on the clipboard before opening."""
    return ShareLink(destination.platform, destination.url, generated_text, copy_text_first=True)


async def open_named_destination(
    destination: ShareDestination,
    generated_text: str,
    clipboard: ClipboardWriter,
    opener: Opener,
) -> ShareLink:
    """Copy the text, then open the destination. A failed copy means no navigation."""
    link = destination_target(destination, generated_text)
    await _write_clipboard(clipboard, link.text)
    await opener(link.url)
    logger.info("named_destination_opened", destination=destination.name, platform=destination.platform.value)
    return link
