# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sqlalchemy_task_repository import SqlAlchemyTaskRepository, to_domain_task

__all__ = ["SqlAlchemyTaskRepository", "to_domain_task"]
