import pytest
from anystore.settings import BaseSettings

from webform.core import get_settings
from webform.exc import ConfigurationError
from webform.settings import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.boundary_length == 20
        assert settings.charset == "utf-8"
        assert settings.default_enctype == "application/x-www-form-urlencoded"

    def test_env(self, monkeypatch):
        monkeypatch.setenv("WEBFORM_BOUNDARY_LENGTH", "32")
        monkeypatch.setenv("WEBFORM_CHARSET", "latin-1")
        settings = Settings()
        assert settings.boundary_length == 32
        assert settings.charset == "latin-1"

    def test_invalid(self):
        with pytest.raises(ConfigurationError):
            Settings(boundary_length=0)
        with pytest.raises(ConfigurationError):
            Settings(charset="no-such-charset")

    def test_base_settings(self):
        assert issubclass(Settings, BaseSettings)

    def test_cached(self):
        assert get_settings() is get_settings()
