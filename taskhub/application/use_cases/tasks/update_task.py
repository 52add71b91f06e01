# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from taskhub.domain.tasks.entities import Task
from taskhub.domain.tasks.repositories import TaskRepository
from taskhub.shared.logging import logger

from .get_task import load_owned_task


class UpdateTaskUseCase:
    def __init__(self, *, tasks: TaskRepository) -> None:
        self._tasks = tasks

    def execute(self, owner_id: int, task_id: int, changes: Mapping[str, Any]) -> Task:
        task = load_owned_task(self._tasks, owner_id, task_id)
        if not changes:
            return task
        updated = task.apply(dict(changes), now=datetime.now(UTC))
        saved = self._tasks.save(updated)
        logger.info(
            f"tasks.update: ok task_id={task_id} owner_id={owner_id} "
            f"fields={','.join(sorted(changes))}"
        )
        return saved
