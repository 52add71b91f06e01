# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskhub.domain.tasks.entities import Task
from taskhub.domain.tasks.exceptions import TaskNotFoundError
from taskhub.domain.tasks.repositories import TaskRepository


def load_owned_task(tasks: TaskRepository, owner_id: int, task_id: int) -> Task:
    """Fetch a task, answering not-found for tasks owned by someone else."""

    task = tasks.get(task_id)
    if task is None or not task.is_owned_by(owner_id):
        raise TaskNotFoundError(task_id)
    return task


class GetTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: int, task_id: int) -> Task:
        return load_owned_task(self._tasks, owner_id, task_id)
