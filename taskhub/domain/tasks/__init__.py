# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Task, TaskFilter, TaskStatus
from .exceptions import TaskNotFoundError
from .repositories import TaskRepository

__all__ = ["Task", "TaskFilter", "TaskNotFoundError", "TaskRepository", "TaskStatus"]
