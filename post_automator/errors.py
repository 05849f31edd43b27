"""Error taxonomy. Every error carries a message that is safe to show the user."""


class AutomatorError(Exception):
    """Base class; ``message`` is user-facing."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AutomatorError):
    """Supplied article JSON is malformed or misses required fields."""

    default_message = "Invalid article data."


class ImageReadError(AutomatorError):
    """Cover image could not be read or encoded."""

    default_message = "Failed to read the image file."


class GenerationError(AutomatorError):
    """The text-generation service call failed. The cause is only logged."""

    default_message = "Failed to generate content from Gemini API."


class ClipboardError(AutomatorError):
    """Clipboard write was denied or is unavailable."""

    default_message = "Could not copy the post text to the clipboard."


class ConfigurationError(AutomatorError):
    """Required configuration is missing; the app refuses to start."""

    default_message = "GEMINI_API_KEY environment variable is not set"


class NothingToShareError(AutomatorError):
    """No generated text is tracked for the article yet."""

    default_message = "Generate a post before sharing it."
