# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str
    created_at: datetime

    def to_public(self) -> PublicUser:
        return PublicUser(id=self.id, username=self.username, created_at=self.created_at)


@dataclass(slots=True, frozen=True)
class PublicUser:
    """User as seen outside the service layer: no password hash."""

    id: int
    username: str
    created_at: datetime
