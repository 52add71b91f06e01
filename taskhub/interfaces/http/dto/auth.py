# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from taskhub.shared.errors.validation_types import ValidationErrorType

from .users import UserResponseDTO

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.\-]+$")

# Overridden per request through the validation context, see ``limits_context``.
DEFAULT_LIMITS = {
    "username_min_length": 4,
    "username_max_length": 20,
    "password_min_length": 8,
    "password_max_length": 30,
}


def limits_context(auth_config: Any) -> dict[str, int]:
    return {key: int(getattr(auth_config, key)) for key in DEFAULT_LIMITS}


def _limit(info: ValidationInfo, key: str) -> int:
    context = info.context or {}
    return int(context.get(key, DEFAULT_LIMITS[key]))


class SignUpRequestDTO(BaseModel):
    username: StrictStr
    password: StrictStr

    model_config = ConfigDict(extra="forbid")

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "Username cannot be empty",
                {},
            )

        low = _limit(info, "username_min_length")
        high = _limit(info, "username_max_length")
        if not low <= len(value) <= high:
            raise PydanticCustomError(
                ValidationErrorType.USERNAME_INVALID_LENGTH,
                "Username must be between {min_length} and {max_length} characters",
                {"min_length": low, "max_length": high},
            )

        if not USERNAME_PATTERN.match(value):
            raise PydanticCustomError(
                ValidationErrorType.USERNAME_INVALID_CHARS,
                "Username may contain only letters, digits, '_', '.' and '-'",
                {"pattern": USERNAME_PATTERN.pattern},
            )

        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str, info: ValidationInfo) -> str:
        low = _limit(info, "password_min_length")
        high = _limit(info, "password_max_length")

        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_BLANK,
                "Password cannot be blank",
                {},
            )

        if len(value) < low:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least {min_length} characters long",
                {"min_length": low},
            )

        if len(value) > high:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_LONG,
                "Password must be at most {max_length} characters long",
                {"max_length": high},
            )

        return value


class SignInRequestDTO(BaseModel):
    # No format or strength checks here: a malformed username simply fails to sign in.
    username: StrictStr = Field(min_length=1, max_length=128)
    password: StrictStr = Field(min_length=1, max_length=128)

    model_config = ConfigDict(extra="forbid")


class TokenResponseDTO(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserResponseDTO
