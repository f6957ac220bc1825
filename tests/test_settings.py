"""
Configuration loading tests
"""

import importlib

import pytest

from users_api.config import settings


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload settings under patched env, restoring the defaults afterwards"""
    yield lambda: importlib.reload(settings)
    monkeypatch.undo()
    importlib.reload(settings)


class TestSettings:

    def test_defaults(self, monkeypatch, reload_settings):
        for name in ("PORT", "LOG_LEVEL", "CORS_ALLOW_ORIGIN"):
            monkeypatch.delenv(name, raising=False)

        reload_settings()

        assert settings.PORT == 8080
        assert settings.LOG_LEVEL == "INFO"
        assert settings.CORS_ALLOW_ORIGIN == "*"

    def test_log_level_is_case_insensitive(self, monkeypatch, reload_settings):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        reload_settings()

        assert settings.LOG_LEVEL == "DEBUG"

    def test_unknown_log_level_names_the_variable(self, monkeypatch, reload_settings):
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            reload_settings()

    def test_non_integer_port_names_the_variable(self, monkeypatch, reload_settings):
        monkeypatch.setenv("PORT", "eighty")

        with pytest.raises(ValueError, match="PORT"):
            reload_settings()
