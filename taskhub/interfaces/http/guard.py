# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token guard for protected routes.

Each request walks Extract -> Verify -> Resolve -> Attach. Any failure ends
in the same 401 ``unauthorized`` response; which stage failed is logged
but never returned to the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, has_request_context, request

from taskhub.application.services.tokens import TokenError, TokenIssuer
from taskhub.domain.users.entities import PublicUser
from taskhub.domain.users.repositories import UserRepository
from taskhub.infrastructure.observability import HttpMetrics
from taskhub.shared.errors.base import UnauthorizedError
from taskhub.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])

BEARER_SCHEME = "bearer"


class _Rejected(Exception):
    def __init__(self, stage: str, reason: str) -> None:
        super().__init__(f"{stage}: {reason}")
        self.stage = stage
        self.reason = reason


def extract_bearer_token(header: str | None) -> str:
    if not header:
        raise _Rejected("extract", "missing_header")
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        raise _Rejected("extract", "malformed_header")
    return parts[1]


class AuthorizationGuard:
    def __init__(
        self,
        *,
        tokens: TokenIssuer,
        users: UserRepository,
        metrics: HttpMetrics | None = None,
    ) -> None:
        self._tokens = tokens
        self._users = users
        self._metrics = metrics

    def authenticate(self, authorization: str | None) -> PublicUser:
        try:
            return self._resolve(authorization)
        except _Rejected as exc:
            where = f" {request.method} {request.path}" if has_request_context() else ""
            logger.warning(f"auth.guard: rejected stage={exc.stage} reason={exc.reason}{where}")
            if self._metrics is not None:
                self._metrics.record_auth_failure(exc.stage)
            raise UnauthorizedError() from exc

    def _resolve(self, authorization: str | None) -> PublicUser:
        token = extract_bearer_token(authorization)

        try:
            claim = self._tokens.verify(token)
        except TokenError as exc:
            raise _Rejected("verify", exc.code) from exc

        user = self._users.find_by_id(claim.subject)
        if user is None:
            raise _Rejected("resolve", "user_missing")
        if user.username != claim.username:
            raise _Rejected("resolve", "username_mismatch")
        return user.to_public()

    def protect(self, view: F) -> F:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            user = self.authenticate(request.headers.get("Authorization"))
            g.current_user = user
            g.user_id = user.id
            logger.debug(f"auth.guard: ok user_id={user.id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, wrapper)


def current_user() -> PublicUser:
    return cast(PublicUser, g.current_user)


__all__ = ["AuthorizationGuard", "current_user", "extract_bearer_token"]
