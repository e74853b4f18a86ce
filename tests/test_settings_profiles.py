from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from todo_service.core.config import Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.reload is True

    test_profile = Settings(environment="test")
    assert test_profile.environment == "test"
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False

    ci_profile = Settings(environment="ci")
    assert ci_profile.environment == "ci"
    assert ci_profile.log_level == "INFO"
    assert ci_profile.reload is False


def test_environment_aliases_are_normalised() -> None:
    assert Settings(environment="DEV").environment == "development"
    assert Settings(environment="testing").environment == "test"


def test_environment_profile_respects_explicit_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_LOG_LEVEL", "error")
    overridden = Settings(environment="test")
    assert overridden.log_level == "ERROR"

    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)
    monkeypatch.setenv("TODO_RELOAD", "true")
    assert Settings(environment="test").reload is True


def test_cors_lists_accept_comma_separated_values() -> None:
    settings = Settings(cors_allow_methods="GET, POST ,")

    assert settings.cors_allow_methods == ["GET", "POST"]


def test_time_zone_is_validated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_TIME_ZONE", "Europe/Warsaw")
    assert Settings().zone == ZoneInfo("Europe/Warsaw")

    with pytest.raises(ValidationError):
        Settings(time_zone="Mars/Olympus_Mons")


def test_cors_lists_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_CORS_ALLOW_ORIGINS", "https://todo.example.com,https://admin.example.com")

    assert Settings().cors_allow_origins == ["https://todo.example.com", "https://admin.example.com"]
