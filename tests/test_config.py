"""Tests for configuration management."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from bitvavo_api.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove credentials that may be set in the CI environment."""
    monkeypatch.delenv("BITVAVO_API_KEY", raising=False)
    monkeypatch.delenv("BITVAVO_API_SECRET", raising=False)


class TestConfigLoading:
    """Test suite for configuration loading from environment variables."""

    def test_config_loads_from_env_vars(self, monkeypatch):
        """Verify config loads all values from environment variables."""
        monkeypatch.setenv("BITVAVO_API_KEY", "test_key")
        monkeypatch.setenv("BITVAVO_API_SECRET", "test_secret")
        monkeypatch.setenv("BITVAVO_API_URL", "https://example.test")
        monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("ACCESS_WINDOW", "5000")
        monkeypatch.setenv("MAX_RETRIES", "5")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_DIR", "/custom/logs")

        settings = Settings(_env_file=None)

        assert settings.bitvavo_api_key == "test_key"
        assert settings.bitvavo_api_secret == "test_secret"
        assert settings.bitvavo_api_url == "https://example.test"
        assert settings.request_timeout == 2.5
        assert settings.access_window == 5000
        assert settings.max_retries == 5
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == Path("/custom/logs")

    def test_default_values_work(self):
        """Verify default values are used when env vars are not set."""
        settings = Settings(_env_file=None)

        assert settings.bitvavo_api_key is None
        assert settings.bitvavo_api_secret is None
        assert settings.bitvavo_api_url == "https://api.bitvavo.com"
        assert settings.request_timeout == 10.0
        assert settings.access_window == 10000
        assert settings.max_retries == 3
        assert settings.retry_base_delay == 1.0
        assert settings.log_level == "INFO"
        assert settings.log_dir == Path("./logs")

    def test_credentials_are_optional_for_public_use(self):
        """Verify settings load without credentials."""
        settings = Settings(_env_file=None)

        assert settings.has_credentials is False

    def test_has_credentials_requires_key_and_secret(self):
        """Verify has_credentials needs both key and secret."""
        only_key = Settings(_env_file=None, bitvavo_api_key="key")
        both = Settings(_env_file=None, bitvavo_api_key="key", bitvavo_api_secret="secret")

        assert only_key.has_credentials is False
        assert both.has_credentials is True

    def test_empty_env_credentials_count_as_unset(self, monkeypatch):
        """Verify blank BITVAVO_API_KEY/SECRET behave like missing ones."""
        monkeypatch.setenv("BITVAVO_API_KEY", "")
        monkeypatch.setenv("BITVAVO_API_SECRET", "")

        settings = Settings(_env_file=None)

        assert settings.bitvavo_api_key is None
        assert settings.has_credentials is False

    def test_blank_credentials_in_env_file_count_as_unset(self, tmp_path, monkeypatch):
        """Verify a .env copied from .env.example loads for public use."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("BITVAVO_API_KEY=\nBITVAVO_API_SECRET=\nLOG_LEVEL=DEBUG\n")

        settings = Settings(_env_file=env_file)

        assert settings.has_credentials is False
        assert settings.log_level == "DEBUG"

    def test_explicit_empty_api_key_is_rejected(self):
        """Verify an empty credential passed in code fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, bitvavo_api_key="")

        error_fields = {e["loc"][0] for e in exc_info.value.errors()}
        assert "bitvavo_api_key" in error_fields

    def test_request_timeout_ms_property(self):
        """Verify request_timeout_ms converts seconds to milliseconds."""
        settings = Settings(_env_file=None, request_timeout=1.5)

        assert settings.request_timeout_ms == 1500

    def test_log_level_validation(self, monkeypatch):
        """Verify log_level validates against allowed values."""
        monkeypatch.setenv("LOG_LEVEL", "INVALID")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_request_timeout_must_be_positive(self, monkeypatch):
        """Verify a zero timeout is rejected."""
        monkeypatch.setenv("REQUEST_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_access_window_range_validation(self, monkeypatch):
        """Verify access_window is capped at 60 seconds."""
        monkeypatch.setenv("ACCESS_WINDOW", "60001")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
