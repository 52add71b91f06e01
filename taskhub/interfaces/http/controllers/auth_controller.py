# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from taskhub.application.use_cases.users.login_user import LoginUserUseCase
from taskhub.application.use_cases.users.register_user import RegisterUserUseCase
from taskhub.interfaces.http.dto.auth import (
    SignInRequestDTO,
    SignUpRequestDTO,
    TokenResponseDTO,
    limits_context,
)
from taskhub.interfaces.http.dto.users import UserResponseDTO
from taskhub.shared.config.settings import AuthConfig
from taskhub.shared.errors.validation import raise_validation_error
from taskhub.shared.logging import logger
from taskhub.shared.middleware.rate_limit import InMemoryRateLimiter, rate_limit


def _json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        auth_config: AuthConfig,
        rate_limiter: InMemoryRateLimiter | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._limits = limits_context(auth_config)
        self._rate_limiter = rate_limiter

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignUpRequestDTO.model_validate(_json_body(), context=self._limits)
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.signup: ok user_id={user.id}")
        return jsonify(UserResponseDTO.from_user(user).model_dump(mode="json")), 201

    def signin(self) -> tuple[Response, int]:
        try:
            dto = SignInRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._login_use_case.execute(dto.username, dto.password)

        payload = TokenResponseDTO(
            token=result.token.token,
            expires_at=result.token.expires_at,
            user=UserResponseDTO.from_user(result.user),
        )
        return jsonify(payload.model_dump(mode="json")), 200

    def as_blueprint(self, url_prefix: str = "/api") -> Blueprint:
        limited = rate_limit(self._rate_limiter)
        bp = Blueprint("auth", __name__, url_prefix=f"{url_prefix}/auth")
        bp.add_url_rule("/signup", view_func=limited(self.signup), methods=["POST"])
        bp.add_url_rule("/signin", view_func=limited(self.signin), methods=["POST"])
        return bp
