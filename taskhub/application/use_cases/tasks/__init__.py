# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .create_task import CreateTaskInput, CreateTaskUseCase
from .delete_task import DeleteTaskUseCase
from .get_task import GetTaskUseCase, load_owned_task
from .list_tasks import ListTasksUseCase
from .update_task import UpdateTaskUseCase

__all__ = [
    "CreateTaskInput",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "UpdateTaskUseCase",
    "load_owned_task",
]
