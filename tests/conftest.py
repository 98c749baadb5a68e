import pytest

from voicefetch.models import VoiceEntry

from .fakes import FakeTTSProvider


@pytest.fixture
def fake_provider():
    return FakeTTSProvider()


@pytest.fixture
def small_catalog():
    """Three-voice catalog in a fixed order."""
    entries = [
        VoiceEntry(id="alloy", display_name="Alloy", style_description="Upbeat", sample_text="Hi, Alloy here."),
        VoiceEntry(id="echo", display_name="Echo", style_description="Calm", sample_text="Hello, Echo here."),
        VoiceEntry(id="nova", display_name="Nova", style_description="Lively", sample_text="Hey, Nova here."),
    ]
    return {e.id: e for e in entries}
