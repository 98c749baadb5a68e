"""Sequential driver that walks a catalog and collects download outcomes."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from voicefetch.catalog import VoiceCatalog
from voicefetch.exceptions import VoiceDownloadError
from voicefetch.models import DownloadOutcome, DownloadSummary
from voicefetch.services.voice_downloader import VoiceDownloader

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class BatchRunner:
    """Download every catalog entry one after the other.

    A fixed pause separates consecutive requests whatever the previous result
    was. Individual failures are recorded, never raised.
    """

    def __init__(
        self,
        downloader: VoiceDownloader,
        delay_seconds: float = 0.5,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self.downloader = downloader
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    async def run_all(self, catalog: VoiceCatalog) -> DownloadSummary:
        logger.info(f"Starting voice sample downloads ({len(catalog)} voices)")
        outcomes: list[DownloadOutcome] = []

        for index, (voice_id, entry) in enumerate(catalog.items()):
            if index > 0 and self.delay_seconds > 0:
                await self._sleep(self.delay_seconds)

            try:
                path = self.downloader.download_one(voice_id, entry)
            except VoiceDownloadError as e:
                outcomes.append(DownloadOutcome.failure(voice_id, e.message))
            else:
                outcomes.append(DownloadOutcome.success(voice_id, path))

        summary = DownloadSummary(outcomes=tuple(outcomes), output_dir=self.downloader.output_dir)
        logger.info(
            f"Batch finished: {summary.success_count} succeeded, {summary.failure_count} failed"
        )
        return summary
