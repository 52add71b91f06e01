# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator
from pydantic_core import PydanticCustomError

from taskhub.domain.tasks.entities import (
    DESCRIPTION_MAX_LENGTH,
    PRIORITY_MAX,
    PRIORITY_MIN,
    TITLE_MAX_LENGTH,
    Task,
    TaskFilter,
    TaskStatus,
)
from taskhub.shared.errors.validation_types import ValidationErrorType


def _require_text(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError(
            ValidationErrorType.TITLE_BLANK,
            "Title cannot be blank",
            {},
        )
    return value


class CreateTaskRequestDTO(BaseModel):
    title: StrictStr = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: StrictStr | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus = TaskStatus.PENDING
    priority: StrictInt = Field(0, ge=PRIORITY_MIN, le=PRIORITY_MAX)

    model_config = ConfigDict(extra="forbid")

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        return _require_text(value)


class UpdateTaskRequestDTO(BaseModel):
    title: StrictStr | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: StrictStr | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus | None = None
    priority: StrictInt | None = Field(None, ge=PRIORITY_MIN, le=PRIORITY_MAX)

    model_config = ConfigDict(extra="forbid")

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str | None) -> str | None:
        return value if value is None else _require_text(value)

    @field_validator("title", "status", "priority", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise PydanticCustomError(
                ValidationErrorType.NULL_NOT_ALLOWED,
                "Field cannot be null",
                {},
            )
        return value

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class TaskListQueryDTO(BaseModel):
    status: TaskStatus | None = None
    priority: int | None = Field(None, ge=PRIORITY_MIN, le=PRIORITY_MAX)

    model_config = ConfigDict(extra="ignore")

    def to_filter(self) -> TaskFilter:
        return TaskFilter(status=self.status, min_priority=self.priority)


class TaskResponseDTO(BaseModel):
    id: int
    owner_id: int
    title: str
    description: str | None
    status: TaskStatus
    priority: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_task(cls, task: Task) -> TaskResponseDTO:
        return cls.model_validate(task)


class TaskListResponseDTO(BaseModel):
    items: list[TaskResponseDTO]
