# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_controller import AuthController
from .misc_controller import MiscController
from .tasks_controller import TasksController
from .users_controller import UsersController

__all__ = ["AuthController", "MiscController", "TasksController", "UsersController"]
