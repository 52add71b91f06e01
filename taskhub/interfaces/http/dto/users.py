# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from taskhub.domain.users.entities import PublicUser


class UserResponseDTO(BaseModel):
    id: int
    username: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_user(cls, user: PublicUser) -> UserResponseDTO:
        return cls.model_validate(user)


class UserListResponseDTO(BaseModel):
    items: list[UserResponseDTO]
