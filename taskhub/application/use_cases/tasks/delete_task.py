# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from taskhub.domain.tasks.entities import Task
from taskhub.domain.tasks.exceptions import TaskNotFoundError
from taskhub.domain.tasks.repositories import TaskRepository
from taskhub.shared.logging import logger

from .get_task import load_owned_task


class DeleteTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: int, task_id: int) -> Task:
        task = load_owned_task(self._tasks, owner_id, task_id)
        if not self._tasks.delete(task_id):
            raise TaskNotFoundError(task_id)
        logger.info(f"tasks.delete: ok task_id={task_id} owner_id={owner_id}")
        return task
