# Tests for settings loading.
# Created: 2026-03-02

from remindersflow.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("REMINDERS_BASE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.base_url == "http://127.0.0.1:8080"
        assert settings.api_token == ""
        assert settings.verify_tls is True
        assert settings.continue_on_fail is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("REMINDERS_BASE_URL", "https://mac.local:8443/")
        monkeypatch.setenv("REMINDERS_ALLOW_UNAUTHORIZED_CERTS", "true")
        monkeypatch.setenv("REMINDERS_REQUEST_TIMEOUT", "2.5")
        settings = Settings(_env_file=None)
        assert settings.base_url == "https://mac.local:8443"
        assert settings.verify_tls is False
        assert settings.request_timeout == 2.5

    def test_get_settings_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
