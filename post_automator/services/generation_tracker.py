"""Per-article generation state, keyed by article URL.

Every generation request gets a ticket: a per-key sequence number. Only the
resolution carrying the latest ticket may update the state; a result for a
superseded request is dropped when it arrives. All transitions run on the
event loop thread, so each one is a single atomic replacement of the entry.
"""
from post_automator.models.schemas import (
    DEFAULT_PLATFORM,
    GenerationState,
    GenerationStatus,
    SocialPlatform,
)
from post_automator.utils.logging import get_logger

logger = get_logger(__name__)


class GenerationTracker:
    """Keyed store of GenerationState. The methods below are its only mutation surface."""

    def __init__(self) -> None:
        self._states: dict[str, GenerationState] = {}
        self._latest_ticket: dict[str, int] = {}
        self._next_ticket = 0

    def __contains__(self, key: str) -> bool:
        return key in self._states

    # ----- lifecycle -----
    def register(self, key: str, platform: SocialPlatform = DEFAULT_PLATFORM) -> GenerationState:
        state = GenerationState(platform=platform)
        self._states[key] = state
        self._latest_ticket.pop(key, None)
        return state

    def remove(self, key: str) -> None:
        self._states.pop(key, None)
        self._latest_ticket.pop(key, None)

    def clear(self) -> None:
        self._states.clear()
        self._latest_ticket.clear()

    # ----- reads -----
    def get(self, key: str) -> GenerationState:
        return self._states[key]

    # ----- transitions -----
    def select_platform(self, key: str, platform: SocialPlatform) -> GenerationState:
        """Change the platform only; status, text and error are untouched."""
        state = self._states[key].model_copy(update={"platform": platform})
        self._states[key] = state
        return state

    def start_generation(self, key: str, platform: SocialPlatform) -> int:
        """Enter InFlight from any state and return the ticket for this request."""
        previous = self._states[key]
        if previous.status is GenerationStatus.IN_FLIGHT:
            logger.info("generation_superseded", key=key, ticket=self._latest_ticket.get(key))
        # Tickets are globally increasing, which makes them monotonic per key too
        self._next_ticket += 1
        ticket = self._next_ticket
        self._latest_ticket[key] = ticket
        self._states[key] = GenerationState(platform=platform, status=GenerationStatus.IN_FLIGHT)
        return ticket

    def on_success(self, key: str, ticket: int, text: str) -> bool:
        if not self._is_current(key, ticket):
            return False
        self._states[key] = self._states[key].model_copy(
            update={"status": GenerationStatus.SUCCEEDED, "result_text": text, "error_message": None}
        )
        return True

    def on_failure(self, key: str, ticket: int, message: str) -> bool:
        if not self._is_current(key, ticket):
            return False
        self._states[key] = self._states[key].model_copy(
            update={"status": GenerationStatus.FAILED, "result_text": None, "error_message": message}
        )
        return True

    def reset(self, key: str) -> GenerationState:
        """Back to Idle, keeping the platform. Any outstanding request is orphaned."""
        state = GenerationState(platform=self._states[key].platform)
        self._states[key] = state
        self._latest_ticket.pop(key, None)
        return state

    def _is_current(self, key: str, ticket: int) -> bool:
        state = self._states.get(key)
        current = (
            state is not None
            and state.status is GenerationStatus.IN_FLIGHT
            and self._latest_ticket.get(key) == ticket
        )
        if not current:
            logger.info("generation_result_discarded", key=key, ticket=ticket, latest=self._latest_ticket.get(key))
        return current
