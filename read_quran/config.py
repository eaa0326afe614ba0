"""
Configuration for read-quran.

Settings are read from environment variables prefixed with READ_QURAN_
(or a local .env file) and can be overridden programmatically.

Example:
    export READ_QURAN_API_BASE_URL="https://api.alquran.cloud/v1"
    export READ_QURAN_AUDIO_EDITION="ar.husary"
"""

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from read_quran.exceptions import ConfigurationError


class ReadQuranSettings(BaseSettings):
    """
    Runtime settings.

    Attributes:
        api_base_url: Base URL of the alquran.cloud REST API
        audio_cdn_base: Base URL of the verse audio CDN
        audio_bitrate: Bitrate segment of the audio CDN path
        audio_edition: Recitation edition used for synthesized audio URLs
        request_timeout: HTTP read timeout in seconds
        connect_timeout: HTTP connect timeout in seconds
        initial_chapter: Chapter shown at startup (1-114)
        log_level: Default log level name
    """

    model_config = SettingsConfigDict(
        env_prefix="READ_QURAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(
        default="https://api.alquran.cloud/v1",
        description="Base URL of the alquran.cloud REST API",
    )
    audio_cdn_base: str = Field(
        default="https://cdn.islamic.network/quran/audio",
        description="Base URL of the verse audio CDN",
    )
    audio_bitrate: int = Field(
        default=128,
        description="Bitrate segment of the audio CDN path",
        gt=0,
    )
    audio_edition: str = Field(
        default="ar.alafasy",
        description="Recitation edition used for synthesized audio URLs",
    )
    request_timeout: float = Field(
        default=30.0,
        description="HTTP read timeout in seconds",
        gt=0,
    )
    connect_timeout: float = Field(
        default=10.0,
        description="HTTP connect timeout in seconds",
        gt=0,
    )
    initial_chapter: int = Field(
        default=1,
        description="Chapter shown at startup",
        ge=1,
        le=114,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Default log level name",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @property
    def chapters_url(self) -> str:
        """URL of the chapter-list endpoint."""
        return f"{self.api_base_url.rstrip('/')}/surah"

    def chapter_url(self, chapter_number: int) -> str:
        """URL of the chapter-detail endpoint for one chapter."""
        return f"{self.chapters_url}/{chapter_number}"


def _build_settings(**overrides: Any) -> ReadQuranSettings:
    try:
        return ReadQuranSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        setting = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid setting: {first.get('msg', e)}",
            setting_name=setting or None,
        ) from e


_settings: ReadQuranSettings | None = None


def get_settings() -> ReadQuranSettings:
    """
    Get the process-wide settings instance.

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    global _settings
    if _settings is None:
        _settings = _build_settings()
    return _settings


def configure(**overrides: Any) -> ReadQuranSettings:
    """
    Replace the process-wide settings with explicit overrides.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        The new settings instance
    """
    global _settings
    _settings = _build_settings(**overrides)
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
