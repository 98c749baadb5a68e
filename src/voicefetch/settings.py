import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from voicefetch.exceptions import MissingCredentialError
from voicefetch.infrastructure.tts.base import ResponseFormat


def find_install_root(module_file: str | Path = __file__) -> Path | None:
    """Return the project root when running from a `src/` checkout, else None."""

    # <root>/src/voicefetch/settings.py
    package_dir = Path(module_file).resolve().parent
    src_dir = package_dir.parent
    root = src_dir.parent
    if src_dir.name == "src" and (root / "pyproject.toml").is_file():
        return root
    return None


def default_output_dir(
    module_file: str | Path = __file__, cwd: Path | None = None
) -> Path:
    """Samples go to `<root>/assets/voices`; installed copies use the working directory."""

    root = find_install_root(module_file) or (cwd or Path.cwd())
    return root / "assets" / "voices"


class Settings(BaseSettings):
    """Application settings loaded from environment variables or `.env` file."""

    log_level: str = Field(default="INFO", description="Logging level")
    openai_api_key: str | None = None

    tts_model: str = Field(default="gpt-4o-mini-tts", description="OpenAI speech model")
    response_format: ResponseFormat = Field(
        default="mp3", description="Audio encoding requested from the provider"
    )
    request_delay_ms: int = Field(
        default=500, ge=0, description="Pause between consecutive synthesis requests"
    )
    output_dir: Path = Field(
        default_factory=default_output_dir, description="Where samples are written"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @property
    def request_delay_seconds(self) -> float:
        return self.request_delay_ms / 1000


def load_settings(**overrides) -> Settings:
    """Build settings, letting non-None *overrides* win over the environment."""

    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def resolve_api_key(settings: Settings) -> str:
    """Return the configured OpenAI key, stripped, or raise MissingCredentialError."""

    key = (settings.openai_api_key or "").strip()
    if not key:
        raise MissingCredentialError(
            "OpenAI API key must be provided via --apiKey or OPENAI_API_KEY."
        )
    return key
