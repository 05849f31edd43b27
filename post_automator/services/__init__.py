"""Validation, prompting, generation, state tracking and sharing."""
from post_automator.services.generation_tracker import GenerationTracker
from post_automator.services.gemini_service import GeminiGateway

__all__ = ["GenerationTracker", "GeminiGateway"]
