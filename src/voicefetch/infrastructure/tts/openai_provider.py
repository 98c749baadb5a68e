from __future__ import annotations

import os

from openai import OpenAI

from voicefetch.infrastructure.tts.base import ResponseFormat, TTSProvider

DEFAULT_MODEL = "gpt-4o-mini-tts"


class OpenAIProvider(TTSProvider):
    """TTS provider for OpenAI API (v1.0+).

    Uses gpt-4o-mini-tts by default, the first OpenAI speech model that accepts
    an ``instructions`` prompt for tone and delivery.

    Outside the CLI the provider can be built without arguments; the key is
    then read from ``OPENAI_API_KEY``.
    """

    name: str = "openai"

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        response_format: ResponseFormat = "mp3",
        client: OpenAI | None = None,
    ) -> None:
        if client is None:
            key = api_key or os.getenv("OPENAI_API_KEY")
            if not key:
                raise ValueError("OpenAI API key not found. Set OPENAI_API_KEY or pass api_key.")
            client = OpenAI(api_key=key)
        self.client = client
        self.model = model
        self.response_format = response_format

    def synthesize(
        self,
        *,
        voice_id: str,
        text: str,
        style: str | None = None,
    ) -> bytes:
        """Synthesize audio using OpenAI TTS API and return the raw bytes."""

        api_params = {
            "model": self.model,
            "voice": voice_id,  # type: ignore[arg-type]
            "input": text,
            "response_format": self.response_format,
        }
        if style:
            api_params["instructions"] = style

        # Binary response is buffered in full, no streaming
        response = self.client.audio.speech.create(**api_params)
        return response.read()
