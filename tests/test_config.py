"""Tests for client configuration."""

import os
from unittest.mock import patch

from sajari_sdk.config import ClientSettings, Environment, Settings, get_settings
from sajari_sdk.transforms import Transform


class TestClientSettings:
    """Tests for ClientSettings."""

    def test_default_values(self) -> None:
        """Defaults point at the public endpoint."""
        settings = ClientSettings()
        assert settings.endpoint == "https://api.sajari.com"
        assert settings.user_agent == "sdk-python-0.1.0"
        assert settings.timeout == 30.0
        assert settings.key_id is None
        assert settings.key_secret is None

    def test_default_add_transforms(self) -> None:
        """Records are split, stopped and stemmed by default."""
        settings = ClientSettings()
        assert settings.default_add_transforms == (Transform.SPLIT_STOP_STEM_INDEXED_FIELDS,)

    def test_env_override(self) -> None:
        """Environment variables override defaults."""
        with patch.dict(os.environ, {"SAJARI_PROJECT": "p1", "SAJARI_TIMEOUT": "5"}):
            settings = ClientSettings()
            assert settings.project == "p1"
            assert settings.timeout == 5.0

    def test_key_secret_is_secret(self) -> None:
        """Key secret should be masked when printed."""
        with patch.dict(os.environ, {"SAJARI_KEY_SECRET": "shh"}):
            settings = ClientSettings()
            assert settings.key_secret is not None
            assert "shh" not in str(settings.key_secret)
            assert settings.key_secret.get_secret_value() == "shh"

    def test_explicit_values_win(self) -> None:
        """Values passed at construction take precedence over the environment."""
        with patch.dict(os.environ, {"SAJARI_ENDPOINT": "http://env"}):
            settings = ClientSettings(endpoint="http://explicit")
            assert settings.endpoint == "http://explicit"


class TestSettings:
    """Tests for top-level settings."""

    def test_default_environment(self) -> None:
        """Default environment is development."""
        settings = Settings()
        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"

    def test_nested_client_settings(self) -> None:
        """Client settings are nested."""
        settings = Settings()
        assert isinstance(settings.client, ClientSettings)

    def test_get_settings_cached(self) -> None:
        """get_settings returns the same instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
