"""Stateless, testable building blocks (download, batch driver, report) live here."""

from .batch_runner import BatchRunner
from .reporting import format_summary, print_summary
from .voice_downloader import VoiceDownloader, prepare_output_dir

__all__ = [
    "BatchRunner",
    "VoiceDownloader",
    "format_summary",
    "prepare_output_dir",
    "print_summary",
]
