# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskhub.domain.tasks.entities import Task, TaskFilter
from taskhub.domain.tasks.repositories import TaskRepository


class ListTasksUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: int, task_filter: TaskFilter | None = None) -> list[Task]:
        return list(self._tasks.list_for_owner(owner_id, task_filter or TaskFilter()))
