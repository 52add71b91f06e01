# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth import SignInRequestDTO, SignUpRequestDTO, TokenResponseDTO, limits_context
from .tasks import (
    CreateTaskRequestDTO,
    TaskListQueryDTO,
    TaskListResponseDTO,
    TaskResponseDTO,
    UpdateTaskRequestDTO,
)
from .users import UserListResponseDTO, UserResponseDTO

__all__ = [
    "CreateTaskRequestDTO",
    "SignInRequestDTO",
    "SignUpRequestDTO",
    "TaskListQueryDTO",
    "TaskListResponseDTO",
    "TaskResponseDTO",
    "TokenResponseDTO",
    "UpdateTaskRequestDTO",
    "UserListResponseDTO",
    "UserResponseDTO",
    "limits_context",
]
