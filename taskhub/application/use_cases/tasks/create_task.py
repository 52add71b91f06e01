# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from taskhub.domain.tasks.entities import Task, TaskStatus
from taskhub.domain.tasks.repositories import TaskRepository
from taskhub.shared.logging import logger


@dataclass(slots=True, frozen=True)
class CreateTaskInput:
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: int = 0


class CreateTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: int, data: CreateTaskInput) -> Task:
        task = self._tasks.add(
            owner_id=owner_id,
            title=data.title,
            description=data.description,
            status=data.status,
            priority=data.priority,
        )
        logger.info(f"tasks.create: ok task_id={task.id} owner_id={owner_id}")
        return task
