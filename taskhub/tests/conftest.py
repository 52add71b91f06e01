from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from flask import Flask
from flask.testing import FlaskClient

from taskhub.app import create_app, get_container
from taskhub.infrastructure.container import Container
from taskhub.shared.config.settings import (
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    ObservabilityConfig,
    SecurityConfig,
)

TEST_SECRET = "test-signing-key-0123456789abcdef0123456789"
FAST_HASH = "pbkdf2:sha256:1000"

ConfigFactory = Callable[..., AppConfig]


@pytest.fixture()
def make_config(tmp_path: Path) -> ConfigFactory:
    def factory(
        *,
        rate_limit: bool = False,
        metrics: bool = True,
        auth: dict[str, Any] | None = None,
        **overrides: Any,
    ) -> AppConfig:
        return AppConfig(
            app_env="test",
            database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'taskhub.db'}"),
            auth=AuthConfig(
                **{"jwt_secret": TEST_SECRET, "password_hash_method": FAST_HASH, **(auth or {})}
            ),
            observability=ObservabilityConfig(metrics_enabled=metrics),
            security=SecurityConfig(
                enable_rate_limit=rate_limit, rate_limit_requests=3, rate_limit_window=60
            ),
            **overrides,
        )

    return factory


@pytest.fixture()
def app(make_config: ConfigFactory) -> Iterator[Flask]:
    application = create_app(make_config())
    yield application
    get_container(application).engine.dispose()


@pytest.fixture()
def container(app: Flask) -> Container:
    return get_container(app)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def signed_in(client: FlaskClient) -> Callable[..., dict[str, str]]:
    """Register and sign in a user; return headers carrying its bearer token."""

    def factory(username: str = "alice", password: str = "Secret123!") -> dict[str, str]:
        signup = client.post("/api/auth/signup", json={"username": username, "password": password})
        assert signup.status_code == 201, signup.get_json()
        signin = client.post("/api/auth/signin", json={"username": username, "password": password})
        assert signin.status_code == 200, signin.get_json()
        return {"Authorization": f"Bearer {signin.get_json()['token']}"}

    return factory
