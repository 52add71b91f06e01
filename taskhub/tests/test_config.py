from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from taskhub.shared.config import AppConfig, ConfigurationError
from taskhub.shared.config.settings import AuthConfig, SecurityConfig


def test_defaults() -> None:
    config = AppConfig(app_env="development")

    assert config.auth.jwt_algorithm == "HS256"
    assert config.auth.token_lifetime == timedelta(minutes=60)
    assert config.auth.password_hash_method.startswith("scrypt:")
    assert config.url_prefix == "/api"
    assert not config.is_production()


def test_environment_variables_are_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_EXPIRES_MINUTES", "15")
    monkeypatch.setenv("RL_LIMIT", "7")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("API_PREFIX", "/v1/")

    config = AppConfig()

    assert config.auth.token_lifetime == timedelta(minutes=15)
    assert config.security.rate_limit_requests == 7
    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.url_prefix == "/v1"


def test_production_refuses_default_secret() -> None:
    with pytest.raises((ConfigurationError, ValidationError)):
        AppConfig(app_env="production")


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(app_env="prod", auth=AuthConfig(jwt_secret="x" * 48))

    assert config.is_production()
    assert config.app_env == "production"


def test_unknown_environment_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppConfig(app_env="moon")


@pytest.mark.parametrize(
    "overrides",
    [
        {"jwt_algorithm": "RS256"},
        {"jwt_expires_minutes": 0},
        {"username_min_length": 30, "username_max_length": 20},
        {"password_min_length": 40},
    ],
)
def test_invalid_auth_settings(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        AuthConfig(**overrides)


def test_boolean_flags_parse_strings() -> None:
    assert SecurityConfig(enable_hsts="yes").enable_hsts is True
    assert SecurityConfig(enable_rate_limit="0").enable_rate_limit is False
