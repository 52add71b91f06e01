# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited bearer tokens.

Tokens are HS256 JWTs carrying ``sub`` (the user id as a string),
``username``, ``iat`` and ``exp``. Nothing is stored server-side: a token is
valid while its signature checks out against the process signing secret and
its expiry has not passed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

import jwt

from taskhub.shared.errors.base import UnauthorizedError

REQUIRED_CLAIMS = ("sub", "username", "iat", "exp")


class TokenError(UnauthorizedError):
    code = "invalid_token"


class ExpiredTokenError(TokenError):
    code = "token_expired"


class InvalidSignatureError(TokenError):
    code = "token_signature_invalid"


class MalformedTokenError(TokenError):
    code = "token_malformed"


@dataclass(slots=True, frozen=True)
class TokenClaim:
    subject: int
    username: str


@dataclass(slots=True, frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime


class TokenIssuer(Protocol):
    def issue(self, claim: TokenClaim) -> IssuedToken: ...
    def verify(self, token: str) -> TokenClaim: ...


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(minutes=60),
        leeway: timedelta = timedelta(0),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._leeway = leeway
        self._clock = clock

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, claim: TokenClaim) -> IssuedToken:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._lifetime
        payload = {
            "sub": str(claim.subject),
            "username": claim.username,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> TokenClaim:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                leeway=self._leeway,
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as exc:
            raise ExpiredTokenError() from exc
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignatureError() from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedTokenError(context={"reason": str(exc)}) from exc

        subject = payload["sub"]
        username = payload["username"]
        if not isinstance(subject, str) or not subject.isdigit():
            raise MalformedTokenError(context={"reason": "sub must be a numeric string"})
        if not isinstance(username, str) or not username:
            raise MalformedTokenError(context={"reason": "username must be a non-empty string"})
        return TokenClaim(subject=int(subject), username=username)
