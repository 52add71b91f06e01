# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .get_user import GetUserUseCase, ListUsersUseCase
from .login_user import LoginUserUseCase, SignInResult
from .register_user import RegisterUserUseCase

__all__ = [
    "GetUserUseCase",
    "ListUsersUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SignInResult",
]
