"""Tests for the sequential batch driver."""

import pytest

from voicefetch.catalog import VOICE_CATALOG
from voicefetch.services.batch_runner import BatchRunner
from voicefetch.services.voice_downloader import VoiceDownloader

from .fakes import FakeTTSProvider


class FakeClock:
    """Virtual clock advanced only by the injected sleep."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TimedProvider(FakeTTSProvider):
    def __init__(self, clock: FakeClock, **kwargs):
        super().__init__(**kwargs)
        self.clock = clock
        self.timestamps: list[float] = []

    def synthesize(self, *, voice_id, text, style=None):
        self.timestamps.append(self.clock.now)
        return super().synthesize(voice_id=voice_id, text=text, style=style)


@pytest.mark.asyncio
async def test_all_voices_succeed(tmp_path, small_catalog):
    clock = FakeClock()
    runner = BatchRunner(VoiceDownloader(FakeTTSProvider(), tmp_path), sleep=clock.sleep)

    summary = await runner.run_all(small_catalog)

    assert summary.success_count == 3
    assert summary.failure_count == 0
    assert [o.voice_id for o in summary.outcomes] == ["alloy", "echo", "nova"]
    assert summary.output_dir == tmp_path
    for outcome in summary.successful:
        assert outcome.file_path.exists()


@pytest.mark.asyncio
async def test_single_failure_is_recorded_and_batch_continues(tmp_path):
    provider = FakeTTSProvider(fail_for={"echo": RuntimeError("Invalid voice: echo")})
    clock = FakeClock()
    runner = BatchRunner(VoiceDownloader(provider, tmp_path), sleep=clock.sleep)

    summary = await runner.run_all(VOICE_CATALOG)

    assert summary.success_count == len(VOICE_CATALOG) - 1
    assert summary.failure_count == 1
    [failed] = summary.failed
    assert failed.voice_id == "echo"
    assert failed.error_message == "Invalid voice: echo"
    # Every voice was attempted, in catalog order
    assert [c["voice_id"] for c in provider.calls] == list(VOICE_CATALOG)


@pytest.mark.asyncio
async def test_every_voice_has_file_or_failure_never_both(tmp_path):
    provider = FakeTTSProvider(
        fail_for={"ash": RuntimeError("401 Unauthorized"), "sage": ConnectionError("reset")}
    )
    runner = BatchRunner(VoiceDownloader(provider, tmp_path), delay_seconds=0)

    summary = await runner.run_all(VOICE_CATALOG)

    failed_ids = {o.voice_id for o in summary.failed}
    for voice_id in VOICE_CATALOG:
        has_file = (tmp_path / f"{voice_id}.mp3").exists()
        assert has_file != (voice_id in failed_ids)
    assert all(o.error_message for o in summary.failed)


@pytest.mark.asyncio
async def test_empty_catalog(tmp_path):
    clock = FakeClock()
    runner = BatchRunner(VoiceDownloader(FakeTTSProvider(), tmp_path), sleep=clock.sleep)

    summary = await runner.run_all({})

    assert summary.success_count == 0
    assert summary.failure_count == 0
    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_requests_are_paced_by_delay(tmp_path, small_catalog):
    clock = FakeClock()
    provider = TimedProvider(clock, fail_for={"echo": RuntimeError("boom")})
    runner = BatchRunner(VoiceDownloader(provider, tmp_path), delay_seconds=0.5, sleep=clock.sleep)

    await runner.run_all(small_catalog)

    # Pause applies after the failed attempt too
    assert clock.sleeps == [0.5, 0.5]
    times = provider.timestamps
    assert len(times) == 3
    for earlier, later in zip(times, times[1:]):
        assert later - earlier >= 0.5


@pytest.mark.asyncio
async def test_zero_delay_skips_sleep(tmp_path, small_catalog):
    clock = FakeClock()
    runner = BatchRunner(
        VoiceDownloader(FakeTTSProvider(), tmp_path), delay_seconds=0, sleep=clock.sleep
    )

    await runner.run_all(small_catalog)

    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_rerun_failure_does_not_keep_old_sample(tmp_path, small_catalog):
    await BatchRunner(VoiceDownloader(FakeTTSProvider(), tmp_path), delay_seconds=0).run_all(
        small_catalog
    )
    assert (tmp_path / "echo.mp3").exists()

    provider = FakeTTSProvider(fail_for={"echo": RuntimeError("429 Too Many Requests")})
    summary = await BatchRunner(VoiceDownloader(provider, tmp_path), delay_seconds=0).run_all(
        small_catalog
    )

    assert [o.voice_id for o in summary.failed] == ["echo"]
    assert not (tmp_path / "echo.mp3").exists()
    assert (tmp_path / "alloy.mp3").exists()
