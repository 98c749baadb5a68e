"""I/O boundary adapters (external APIs)."""

from .tts import (
    OpenAIProvider,
    ResponseFormat,
    TTSProvider,
)

__all__ = [
    "OpenAIProvider",
    "ResponseFormat",
    "TTSProvider",
]
