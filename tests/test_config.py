import pytest
from pydantic import ValidationError

from app.core.config import GoogleSettings, Settings


def test_reads_original_environment_names(monkeypatch):
    monkeypatch.setenv("SECRET", "from-env")
    monkeypatch.setenv("STAY_DURATION", "30000")
    monkeypatch.setenv("PORT", "3000")

    settings = Settings(_env_file=None)

    assert settings.secret == "from-env"
    assert settings.stay_duration == 30000
    assert settings.stay_seconds == 30
    assert settings.port == 3000


def test_defaults(monkeypatch):
    for name in ("SECRET", "STAY_DURATION", "PORT", "MAX_CONCURRENT_SESSIONS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.stay_duration == 60000
    assert settings.port == 10000
    assert settings.max_concurrent_sessions == 2
    assert settings.browser.viewport_width == 1280
    assert settings.browser.viewport_height == 720


def test_google_credentials_from_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_EMAIL", "bot@example.com")
    monkeypatch.setenv("GOOGLE_PASSWORD", "pw")

    assert GoogleSettings(_env_file=None).has_credentials is True
    assert GoogleSettings(email="bot@example.com", password=None).has_credentials is False


def test_google_credentials_from_legacy_names(monkeypatch):
    monkeypatch.delenv("GOOGLE_EMAIL", raising=False)
    monkeypatch.delenv("GOOGLE_PASSWORD", raising=False)
    monkeypatch.setenv("GMAIL", "legacy@example.com")
    monkeypatch.setenv("GPASSWORD", "legacy-pw")

    google = GoogleSettings(_env_file=None)

    assert google.has_credentials is True
    assert google.email == "legacy@example.com"
    assert google.password == "legacy-pw"


def test_log_level_is_normalised():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_settings_are_immutable():
    settings = Settings(secret="a")

    with pytest.raises(ValidationError):
        settings.secret = "b"
