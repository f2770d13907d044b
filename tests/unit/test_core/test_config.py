"""
Unit tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from graylog_mcp.core.config import Settings, load_settings
from graylog_mcp.core.exceptions import ConfigurationError
from graylog_mcp.server import main


class TestLoadSettings:
    """Tests for load_settings."""

    def test_loads_required_values(self):
        settings = load_settings({"BASE_URL": "https://graylog.local/", "API_TOKEN": "secret"})

        assert settings.base_url == "https://graylog.local"
        assert settings.api_token.get_secret_value() == "secret"
        assert settings.timeout == 30.0

    def test_missing_both_named(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings({})

        assert exc_info.value.message == "Missing environment variables: BASE_URL, API_TOKEN"
        assert exc_info.value.missing == ["BASE_URL", "API_TOKEN"]

    def test_empty_value_counts_as_missing(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings({"BASE_URL": "https://graylog.local", "API_TOKEN": "  "})

        assert exc_info.value.missing == ["API_TOKEN"]

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("BASE_URL", "https://env.graylog")
        monkeypatch.setenv("API_TOKEN", "env-token")

        assert load_settings().base_url == "https://env.graylog"


class TestSettings:
    """Tests for the Settings model."""

    def test_immutable(self):
        settings = Settings(base_url="https://graylog.local", api_token="secret")

        with pytest.raises(ValidationError):
            settings.base_url = "https://elsewhere"

    def test_token_hidden_in_repr(self):
        settings = Settings(base_url="https://graylog.local", api_token="secret")

        assert "secret" not in repr(settings)


class TestMain:
    """Tests for the startup entry point."""

    def test_missing_configuration_exits_with_status_1(self, monkeypatch, tmp_path):
        monkeypatch.delenv("BASE_URL", raising=False)
        monkeypatch.delenv("API_TOKEN", raising=False)
        # No .env file in the working directory
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
