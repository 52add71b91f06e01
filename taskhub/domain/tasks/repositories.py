# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Task, TaskFilter, TaskStatus


class TaskRepository(Protocol):
    def add(
        self,
        *,
        owner_id: int,
        title: str,
        description: str | None,
        status: TaskStatus,
        priority: int,
    ) -> Task: ...
    def get(self, task_id: int) -> Task | None: ...
    def list_for_owner(self, owner_id: int, task_filter: TaskFilter) -> Sequence[Task]: ...
    def save(self, task: Task) -> Task: ...
    def delete(self, task_id: int) -> bool: ...
