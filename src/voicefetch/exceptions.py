class VoiceFetchError(Exception):
    """Base class for errors raised by voicefetch."""


class MissingCredentialError(VoiceFetchError):
    """No usable API key was supplied."""


class VoiceDownloadError(VoiceFetchError):
    """Fetching or writing one voice sample failed."""

    def __init__(self, voice_id: str, message: str):
        self.voice_id = voice_id
        self.message = message
        super().__init__(f"{voice_id}: {message}")
