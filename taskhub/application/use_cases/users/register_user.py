# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskhub.domain.users.entities import PublicUser
from taskhub.domain.users.exceptions import UserAlreadyExistsError
from taskhub.domain.users.repositories import PasswordHasher, UserRepository
from taskhub.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> PublicUser:
        if self._users.find_by_username(username) is not None:
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        # insert() raises UserAlreadyExistsError too when a concurrent sign-up wins the race
        persisted = self._users.insert(username, hashed)
        logger.info(f"auth.signup: created user_id={persisted.id}")
        return persisted.to_public()
