"""Tests for application settings."""

import pytest

from api.config import Settings, get_settings
from inspector.crawler.fetcher import GOOGLEBOT_USER_AGENT


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RENDER_ENABLED", raising=False)
        settings = Settings(_env_file=None)

        assert settings.fetch_user_agent == GOOGLEBOT_USER_AGENT
        assert settings.fetch_timeout == 30.0
        assert settings.fetch_proxy is None
        assert settings.render_enabled is True
        assert settings.render_timeout_ms == 30000
        assert settings.render_settle_ms == 2000
        assert settings.render_viewport_width == 1920
        assert settings.render_viewport_height == 1080

    def test_test_environment(self) -> None:
        settings = get_settings()

        assert settings.is_test
        assert not settings.is_production
        assert settings.render_enabled is False

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FETCH_TIMEOUT", "10")
        monkeypatch.setenv("FETCH_PROXY", "http://127.0.0.1:7890")
        monkeypatch.setenv("RENDER_SETTLE_MS", "500")

        settings = Settings(_env_file=None)

        assert settings.fetch_timeout == 10.0
        assert settings.fetch_proxy == "http://127.0.0.1:7890"
        assert settings.render_settle_ms == 500

    def test_settings_cached(self) -> None:
        assert get_settings() is get_settings()
