from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal

ResponseFormat = Literal["mp3", "opus", "aac", "flac", "wav", "pcm"]


class TTSProvider(ABC):
    """Abstract base class for TTS providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the (unique) short-name for this provider (e.g. 'openai')."""

    @abstractmethod
    def synthesize(
        self,
        *,  # force keyword-only args
        voice_id: str,
        text: str,
        style: str | None = None,  # steering instruction
    ) -> bytes:
        """Synthesise *text* with *voice_id* and return the full audio payload."""
