# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskhub.shared.errors.base import ConflictError, NotFoundError, UnauthorizedError


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"
    message = "Username is already taken"


class InvalidCredentialsError(UnauthorizedError):
    code = "invalid_credentials"
    message = "Invalid username or password"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"

    def __init__(self, user_id: int) -> None:
        super().__init__(context={"user_id": user_id})
