from __future__ import annotations

from voicefetch.models import DownloadSummary

RULE = "=" * 50


def format_summary(summary: DownloadSummary) -> list[str]:
    """Render *summary* as the console report lines."""
    lines = ["", RULE, "DOWNLOAD SUMMARY", RULE]

    lines.append(f"✅ Successful downloads: {summary.success_count}")
    for outcome in summary.successful:
        lines.append(f"   - {outcome.file_path.name}")

    if summary.failed:
        lines.append("")
        lines.append(f"❌ Failed downloads: {summary.failure_count}")
        for outcome in summary.failed:
            lines.append(f"   - {outcome.voice_id}: {outcome.error_message}")

    lines.append("")
    lines.append(f"Files saved to: {summary.output_dir}")
    return lines


def print_summary(summary: DownloadSummary) -> None:
    for line in format_summary(summary):
        print(line)
