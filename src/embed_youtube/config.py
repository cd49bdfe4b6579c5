"""Configuration management using pydantic-settings."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigFileError
from .models import EmbedConfig


def find_env_file() -> Path | None:
    """Find .env file in current or parent directories."""
    current = Path.cwd()
    root = Path("/")

    while current != root:
        env_path = current / ".env"
        if env_path.exists():
            return env_path
        current = current.parent

    # Check home directory as fallback
    home_env = Path.home() / ".embed-youtube" / ".env"
    if home_env.exists():
        return home_env

    return None


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="EMBED_YOUTUBE_",
        env_file=find_env_file() or ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Widget Configuration
    config_file: Path | None = Field(
        default=None, description="Default widget config file (JSON) for the CLI"
    )

    # Logging Configuration
    log_dir: Path = Field(
        default=Path.home() / ".embed-youtube" / "logs",
        description="Directory for log files",
    )
    log_file_name: str = Field(default="embed_youtube.log", description="Log file name")

    @field_validator("log_file_name")
    @classmethod
    def validate_log_file_name(cls, v: str) -> str:
        """Ensure the log file name is a bare file name."""
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"Log file name must be a plain file name: {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get application settings (cached singleton).

    Raises:
        RuntimeError: If configuration is invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        raise RuntimeError(
            f"❌ Configuration error\n\n{e}\n\n"
            "Check EMBED_YOUTUBE_* environment variables and your .env file."
        ) from e


def load_embed_config(path: Path, overrides: dict[str, Any] | None = None) -> EmbedConfig:
    """Load a widget config from a JSON file.

    Missing options take their defaults. Overrides replace file values.

    Args:
        path: Path to a JSON object of widget options
        overrides: Option values taking precedence over the file

    Returns:
        Parsed widget configuration

    Raises:
        ConfigFileError: If the file cannot be read or holds invalid options
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigFileError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigFileError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileError(f"Failed to read config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigFileError(f"Config file must contain a JSON object: {path}")

    return build_embed_config({**raw, **(overrides or {})})


def build_embed_config(options: dict[str, Any]) -> EmbedConfig:
    """Merge options over defaults into an EmbedConfig.

    Raises:
        ConfigFileError: If an option has an invalid value
    """
    try:
        return EmbedConfig.model_validate(options)
    except ValidationError as e:
        raise ConfigFileError(f"Invalid widget options: {e}") from e
