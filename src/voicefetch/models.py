from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class VoiceEntry(BaseModel):
    """Catalog entry describing one voice and the sample it should speak."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Voice identifier known to the provider")
    display_name: str = Field(..., min_length=1, description="Human readable voice name")
    style_description: str = Field(
        ..., min_length=1, description="Tone and delivery instruction for the sample"
    )
    sample_text: str = Field(..., min_length=1, description="Utterance to synthesise")


class DownloadOutcome(BaseModel):
    """Result of attempting to fetch one voice sample."""

    model_config = ConfigDict(frozen=True)

    voice_id: str = Field(..., description="Catalog voice identifier")
    succeeded: bool = Field(..., description="Whether the sample was written")
    file_path: Path | None = Field(None, description="Written file, set on success only")
    error_message: str | None = Field(None, description="Failure text, set on failure only")

    @model_validator(mode="after")
    def check_result_fields(self) -> DownloadOutcome:
        if self.succeeded:
            if self.file_path is None or self.error_message is not None:
                raise ValueError("successful outcome needs file_path and no error_message")
        else:
            if not self.error_message or self.file_path is not None:
                raise ValueError("failed outcome needs a non-empty error_message and no file_path")
        return self

    @classmethod
    def success(cls, voice_id: str, file_path: Path) -> DownloadOutcome:
        return cls(voice_id=voice_id, succeeded=True, file_path=file_path)

    @classmethod
    def failure(cls, voice_id: str, error_message: str) -> DownloadOutcome:
        return cls(voice_id=voice_id, succeeded=False, error_message=error_message)


class DownloadSummary(BaseModel):
    """All outcomes of a batch run, in catalog order."""

    model_config = ConfigDict(frozen=True)

    outcomes: tuple[DownloadOutcome, ...] = Field(default_factory=tuple)
    output_dir: Path = Field(..., description="Directory the samples were written to")

    @property
    def successful(self) -> list[DownloadOutcome]:
        return [o for o in self.outcomes if o.succeeded]

    @property
    def failed(self) -> list[DownloadOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def success_count(self) -> int:
        return len(self.successful)

    @property
    def failure_count(self) -> int:
        return len(self.failed)
