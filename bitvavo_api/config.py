"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Bitvavo API
    bitvavo_api_key: str | None = Field(default=None, min_length=1, description="Bitvavo API key")
    bitvavo_api_secret: str | None = Field(default=None, min_length=1, description="Bitvavo API secret")
    bitvavo_api_url: str = Field(default="https://api.bitvavo.com", description="REST API base URL")

    # Transport
    request_timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")
    access_window: int = Field(default=10000, ge=1, le=60000, description="Signed request validity in milliseconds")

    # Retry
    max_retries: int = Field(default=3, ge=1, le=10, description="Attempts for idempotent requests")
    retry_base_delay: float = Field(default=1.0, ge=0, description="Initial backoff delay in seconds")

    # Logging
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_dir: Path = Field(default=Path("./logs"), description="Directory for log files")

    @property
    def has_credentials(self) -> bool:
        """Return True when both API key and secret are configured."""
        return bool(self.bitvavo_api_key and self.bitvavo_api_secret)

    @property
    def request_timeout_ms(self) -> int:
        """Return the request timeout in milliseconds."""
        return int(self.request_timeout * 1000)
