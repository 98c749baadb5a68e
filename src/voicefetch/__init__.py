"""
voicefetch – batch download of text-to-speech voice samples.

This top-level package exposes the catalog and result models.
"""

from .catalog import VOICE_CATALOG, get_catalog
from .models import (
    DownloadOutcome,
    DownloadSummary,
    VoiceEntry,
)

__all__ = [
    "VOICE_CATALOG",
    "DownloadOutcome",
    "DownloadSummary",
    "VoiceEntry",
    "get_catalog",
]
