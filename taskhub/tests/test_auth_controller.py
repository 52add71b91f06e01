from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from taskhub.application.services.tokens import IssuedToken
from taskhub.application.use_cases.users.login_user import LoginUserUseCase, SignInResult
from taskhub.application.use_cases.users.register_user import RegisterUserUseCase
from taskhub.domain.users.entities import PublicUser
from taskhub.domain.users.exceptions import InvalidCredentialsError
from taskhub.interfaces.http.controllers.auth_controller import AuthController
from taskhub.shared.config.settings import AuthConfig
from taskhub.shared.middleware.error_handler import configure_error_handling

CREATED_AT = datetime(2025, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_signup_endpoint_returns_created_user(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, username: str, password: str) -> PublicUser:
            register_called["args"] = (username, password)
            return PublicUser(id=7, username=username, created_at=CREATED_AT)

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
        auth_config=AuthConfig(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/signup", json={"username": "alice", "password": "Secret123!"}
        )

    assert response.status_code == 201
    assert register_called["args"] == ("alice", "Secret123!")
    assert response.get_json() == {
        "id": 7,
        "username": "alice",
        "created_at": "2025-05-01T12:00:00Z",
    }


def test_signup_invalid_payload_never_reaches_use_case(flask_app: Flask) -> None:
    register = MagicMock()
    controller = AuthController(
        register_use_case=register,
        login_use_case=MagicMock(),
        auth_config=AuthConfig(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/signup", json={"username": "a"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"
    register.execute.assert_not_called()


def test_signin_returns_bearer_token(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = SignInResult(
        user=PublicUser(id=7, username="alice", created_at=CREATED_AT),
        token=IssuedToken(token="header.payload.sig", expires_at=CREATED_AT),
    )
    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=cast(LoginUserUseCase, login),
        auth_config=AuthConfig(),
    )
    flask_app.register_blueprint(controller.as_blueprint("/v2"))

    with flask_app.test_client() as client:
        response = client.post("/v2/auth/signin", json={"username": "alice", "password": "pw"})

    assert response.status_code == 200
    body = response.get_json()
    assert body["token"] == "header.payload.sig"
    assert body["token_type"] == "bearer"
    assert body["user"]["id"] == 7
    login.execute.assert_called_once_with("alice", "pw")


def test_signin_failure_maps_to_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(
        register_use_case=MagicMock(),
        login_use_case=login,
        auth_config=AuthConfig(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/signin", json={"username": "alice", "password": "pw"})

    assert response.status_code == 401
    assert response.get_json()["error"] == "invalid_credentials"
