# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Task entities and the rules that keep them consistent."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum
from typing import Any

from taskhub.domain.exceptions import InvariantViolation

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 2000
PRIORITY_MIN = 0
PRIORITY_MAX = 10

MUTABLE_FIELDS = frozenset({"title", "description", "status", "priority"})


class TaskStatus(StrEnum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


@dataclass(slots=True, frozen=True)
class Task:
    """A unit of work owned by exactly one user."""

    id: int
    owner_id: int
    title: str
    description: str | None
    status: TaskStatus
    priority: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", TaskStatus(self.status))
        if not self.title or not self.title.strip():
            raise InvariantViolation("title must not be blank", field="title")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise InvariantViolation(
                f"title must be at most {TITLE_MAX_LENGTH} characters", field="title"
            )
        if self.description is not None and len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise InvariantViolation(
                f"description must be at most {DESCRIPTION_MAX_LENGTH} characters",
                field="description",
            )
        if not PRIORITY_MIN <= self.priority <= PRIORITY_MAX:
            raise InvariantViolation(
                f"priority must be between {PRIORITY_MIN} and {PRIORITY_MAX}",
                field="priority",
            )

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id

    def apply(self, changes: dict[str, Any], *, now: datetime) -> Task:
        """Return a copy with ``changes`` applied; unknown keys are rejected."""

        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise InvariantViolation(
                f"cannot change {', '.join(sorted(unknown))}", field=sorted(unknown)[0]
            )
        return replace(self, **changes, updated_at=now)


@dataclass(slots=True, frozen=True)
class TaskFilter:
    status: TaskStatus | None = None
    min_priority: int | None = None
