from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from voicefetch.exceptions import VoiceDownloadError
from voicefetch.infrastructure.tts import ResponseFormat, TTSProvider
from voicefetch.models import VoiceEntry

logger = logging.getLogger(__name__)


def prepare_output_dir(path: Path) -> Path:
    """Create *path* (and parents) if missing. Filesystem errors propagate."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def _describe(exc: BaseException) -> str:
    # Some SDK errors stringify to "", outcomes need a message
    return str(exc) or exc.__class__.__name__


def _write_atomic(out_path: Path, data: bytes) -> None:
    """Write *data* next to *out_path* and move it into place in one step."""
    tmp_file = tempfile.NamedTemporaryFile(
        dir=out_path.parent, prefix=f".{out_path.name}.", suffix=".part", delete=False
    )
    tmp_path = Path(tmp_file.name)
    try:
        with tmp_file:
            tmp_file.write(data)
        os.replace(tmp_path, out_path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def _remove_stale(out_path: Path) -> None:
    try:
        out_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Failed to delete stale sample {out_path}: {e}")


class VoiceDownloader:
    """Fetch one voice sample from a provider and store it on disk."""

    def __init__(
        self,
        provider: TTSProvider,
        output_dir: Path,
        response_format: ResponseFormat = "mp3",
    ) -> None:
        self.provider = provider
        self.output_dir = Path(output_dir)
        self.response_format = response_format

    def target_path(self, voice_id: str) -> Path:
        return self.output_dir / f"{voice_id}.{self.response_format}"

    def download_one(self, voice_id: str, entry: VoiceEntry) -> Path:
        """Synthesise *entry*'s sample with *voice_id* and write it to disk.

        Overwrites any previous file for the same voice. On failure any
        existing target file is removed and the error is logged and re-raised
        as ``VoiceDownloadError``.
        """
        logger.info(f"Downloading voice sample for: {entry.display_name} ({voice_id})")
        out_path = self.target_path(voice_id)
        try:
            audio = self.provider.synthesize(
                voice_id=voice_id,
                text=entry.sample_text,
                style=entry.style_description,
            )
            _write_atomic(out_path, audio)
        except Exception as e:
            message = _describe(e)
            logger.error(f"❌ Error downloading {voice_id}: {message}")
            _remove_stale(out_path)
            raise VoiceDownloadError(voice_id, message) from e

        logger.info(f"✅ Successfully saved: {out_path.name} ({len(audio)} bytes)")
        return out_path
