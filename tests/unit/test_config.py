from __future__ import annotations

import pytest
from pydantic import ValidationError

from bookshelf import config

ENV_VARS = [
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "BOOKSHELF_LOCALE",
    "BOOKSHELF_ALLOW_WRITES",
    "BOOKSHELF_DECORATOR_LAYERS",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a stray .env in the working directory out of the picture.
    monkeypatch.chdir(tmp_path)


def test_get_settings_defaults(clean_env):
    settings = config.get_settings()
    assert settings.app_env == "development"
    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.locale == "en"
    assert settings.allow_writes is True
    assert settings.decorator_layers == 1


def test_get_settings_is_cached(clean_env):
    assert config.get_settings() is config.get_settings()


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("BOOKSHELF_LOCALE", "ro")
    monkeypatch.setenv("BOOKSHELF_ALLOW_WRITES", "false")
    monkeypatch.setenv("BOOKSHELF_DECORATOR_LAYERS", "3")

    settings = config.Settings()

    assert settings.locale == "ro"
    assert settings.allow_writes is False
    assert settings.decorator_layers == 3


def test_rejects_unknown_locale(clean_env, monkeypatch):
    monkeypatch.setenv("BOOKSHELF_LOCALE", "fr")
    with pytest.raises(ValidationError):
        config.Settings()


def test_rejects_zero_decorator_layers(clean_env):
    with pytest.raises(ValidationError):
        config.Settings(decorator_layers=0)
