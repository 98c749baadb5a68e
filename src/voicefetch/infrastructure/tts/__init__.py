"""TTS provider implementations."""

# Re-export for easier access, e.g. `from voicefetch.infrastructure.tts import OpenAIProvider`
from .base import ResponseFormat, TTSProvider
from .openai_provider import OpenAIProvider

__all__ = [
    "OpenAIProvider",
    "ResponseFormat",
    "TTSProvider",
]
