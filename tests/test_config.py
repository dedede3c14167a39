"""Settings tests."""

import pytest
from pydantic import ValidationError

from randomuser_proxy.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "RANDOMUSER_PROXY_PORT", "RANDOMUSER_PROXY_RANDOMUSER_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings()
    assert settings.port == 3000
    assert settings.randomuser_url == "https://randomuser.me/api/"
    assert settings.randomuser_timeout is None


def test_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    assert Settings().port == 8080


def test_prefixed_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOMUSER_PROXY_PORT", "4000")
    monkeypatch.setenv("RANDOMUSER_PROXY_RANDOMUSER_TIMEOUT", "2.5")
    settings = Settings()
    assert settings.port == 4000
    assert settings.randomuser_timeout == 2.5


def test_settings_are_immutable() -> None:
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.port = 1


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
