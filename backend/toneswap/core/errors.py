from __future__ import annotations

TRANSFORM_EMPTY_INPUT_MESSAGE = "Please enter some text to transform"

GENERATION_UNAVAILABLE_MESSAGE = (
    "Failed to transform text. The AI model might be temporarily unavailable. Please try again later."
)


class ToneSwapError(Exception):
    """Base class for pipeline errors."""


class TransformValidationError(ToneSwapError):
    """Input rejected before any external call. Message is safe to show to users."""

    def __init__(self, message: str = TRANSFORM_EMPTY_INPUT_MESSAGE):
        super().__init__(message)
        self.message = message


class GenerationError(ToneSwapError):
    """The text generator failed. The cause is for logs only."""


class PersistenceError(ToneSwapError):
    """The community store failed to append or list."""
