"""Command-line entry point: fetch every catalog voice sample once."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from voicefetch.catalog import VOICE_CATALOG, VoiceCatalog, get_catalog, select_voices
from voicefetch.exceptions import MissingCredentialError
from voicefetch.infrastructure.tts import OpenAIProvider
from voicefetch.services import BatchRunner, VoiceDownloader, prepare_output_dir, print_summary
from voicefetch.settings import Settings, load_settings, resolve_api_key

logger = logging.getLogger(__name__)


def make_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voicefetch",
        description="Download a synthesized sample for every catalog voice from OpenAI TTS.",
    )
    parser.add_argument(
        "--apiKey",
        "--api-key",
        dest="api_key",
        default=None,
        help="OpenAI API key. Falls back to the OPENAI_API_KEY environment variable.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the <voice>.mp3 files (default: <project>/assets/voices).",
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help="Pause between requests in milliseconds (default: 500).",
    )
    parser.add_argument("--model", default=None, help="Speech model (default: gpt-4o-mini-tts).")
    parser.add_argument(
        "--voice",
        action="append",
        choices=list(VOICE_CATALOG),
        help="Only fetch this voice. Repeatable.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO).")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return make_arg_parser().parse_args(argv)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _run_batch(
    settings: Settings,
    api_key: str,
    catalog: VoiceCatalog,
    voice_ids: list[str] | None,
) -> None:
    catalog = select_voices(catalog, voice_ids)

    provider = OpenAIProvider(
        api_key=api_key,
        model=settings.tts_model,
        response_format=settings.response_format,
    )
    output_dir = prepare_output_dir(settings.output_dir)
    downloader = VoiceDownloader(provider, output_dir, response_format=settings.response_format)
    runner = BatchRunner(downloader, delay_seconds=settings.request_delay_seconds)

    summary = asyncio.run(runner.run_all(catalog))
    print_summary(summary)


def main(argv: list[str] | None = None, catalog: VoiceCatalog | None = None) -> int:
    """Run the download batch and return the process exit code.

    *catalog* defaults to the built-in voice catalog.
    """
    args = parse_args(argv)

    try:
        settings = load_settings(
            openai_api_key=args.api_key,
            output_dir=args.output_dir,
            request_delay_ms=args.delay_ms,
            tts_model=args.model,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"❌ Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    _configure_logging(settings)

    try:
        api_key = resolve_api_key(settings)
    except MissingCredentialError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    try:
        _run_batch(
            settings,
            api_key,
            get_catalog() if catalog is None else catalog,
            args.voice,
        )
    except Exception:
        logger.exception("💥 Fatal error")
        return 1

    print("\n🎉 Voice download process completed!")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
