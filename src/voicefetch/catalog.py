"""Static catalog of the voices whose samples ship with the app."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from voicefetch.models import VoiceEntry

VoiceCatalog = Mapping[str, VoiceEntry]

_ENTRIES = (
    VoiceEntry(
        id="alloy",
        display_name="Alloy",
        style_description="Upbeat and approachable, great for everyday conversations",
        sample_text="Hey friend! I'm Alloy, and I'm here to make learning fun and easy to understand!",
    ),
    VoiceEntry(
        id="ash",
        display_name="Ash",
        style_description="Steady and reassuring, perfect for calm explanations",
        sample_text="Hi, I'm Ash. Let's take things step by step so everything feels clear and simple.",
    ),
    VoiceEntry(
        id="ballad",
        display_name="Ballad",
        style_description="Playful and musical, adds rhythm to learning",
        sample_text="Hello! I'm Ballad. Let's turn our ideas into stories and songs you'll always remember!",
    ),
    VoiceEntry(
        id="coral",
        display_name="Coral",
        style_description="Cheerful and bubbly, adds excitement to lessons",
        sample_text="Hi there! I'm Coral, and I can't wait to dive into something fun and exciting with you!",
    ),
    VoiceEntry(
        id="echo",
        display_name="Echo",
        style_description="Relaxing and thoughtful, encourages winding down",
        sample_text="Hello, my friend. I'm Echo, and I'd love to share a calm story with you tonight.",
    ),
    VoiceEntry(
        id="fable",
        display_name="Fable",
        style_description="Imaginative and lively, makes stories come alive",
        sample_text="Greetings! I'm Fable, and I can't wait to whisk you away on an amazing adventure!",
    ),
    VoiceEntry(
        id="nova",
        display_name="Nova",
        style_description="Lively and dynamic, sparks curiosity and excitement",
        sample_text="Hey there! I'm Nova, and I'm ready to blast off into a world of discovery with you!",
    ),
    VoiceEntry(
        id="sage",
        display_name="Sage",
        style_description="Patient and wise, guides learning with care",
        sample_text="Hello. I'm Sage, and I enjoy helping you find answers and discover new ideas.",
    ),
    VoiceEntry(
        id="shimmer",
        display_name="Shimmer",
        style_description="Soft and nurturing, builds a safe learning space",
        sample_text="Hi there, sweet one! I'm Shimmer, and I'm here to have kind, caring talks with you.",
    ),
    VoiceEntry(
        id="verse",
        display_name="Verse",
        style_description="Clear and rhythmic, helps with memory and repetition",
        sample_text="Hello! I'm Verse, and I love practicing words and rhythms to make learning stick!",
    ),
)

VOICE_CATALOG: VoiceCatalog = MappingProxyType({entry.id: entry for entry in _ENTRIES})


def get_catalog() -> VoiceCatalog:
    """Return the built-in catalog (read-only, definition order)."""

    return VOICE_CATALOG


def select_voices(catalog: VoiceCatalog, voice_ids: Iterable[str] | None) -> VoiceCatalog:
    """Restrict *catalog* to *voice_ids*, keeping catalog order.

    ``None`` or an empty selection returns the catalog unchanged. Unknown ids
    raise ``KeyError``.
    """

    wanted = set(voice_ids or ())
    if not wanted:
        return catalog

    unknown = sorted(wanted - set(catalog))
    if unknown:
        raise KeyError(f"Unknown voice id(s): {', '.join(unknown)}")

    return MappingProxyType({vid: entry for vid, entry in catalog.items() if vid in wanted})
