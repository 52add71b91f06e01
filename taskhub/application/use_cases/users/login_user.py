# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from dataclasses import dataclass
from functools import cached_property

from taskhub.application.services.tokens import IssuedToken, TokenClaim, TokenIssuer
from taskhub.domain.users.entities import PublicUser
from taskhub.domain.users.exceptions import InvalidCredentialsError
from taskhub.domain.users.repositories import PasswordHasher, UserRepository
from taskhub.shared.logging import logger


@dataclass(slots=True, frozen=True)
class SignInResult:
    user: PublicUser
    token: IssuedToken


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    @cached_property
    def _dummy_hash(self) -> str:
        return self._password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, username: str, password: str) -> SignInResult:
        user = self._users.find_by_username(username)
        if user is None:
            # Same hashing cost as a real check: timing must not reveal unknown usernames.
            self._password_hasher.verify(password, self._dummy_hash)
            logger.info(f"auth.signin: rejected username={username!r} reason=unknown_user")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.signin: rejected user_id={user.id} reason=bad_password")
            raise InvalidCredentialsError()

        issued = self._tokens.issue(TokenClaim(subject=user.id, username=user.username))
        logger.info(f"auth.signin: ok user_id={user.id} exp={issued.expires_at.isoformat()}")
        return SignInResult(user=user.to_public(), token=issued)
