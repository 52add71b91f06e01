# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select

from taskhub.domain.tasks.entities import Task as DomainTask
from taskhub.domain.tasks.entities import TaskFilter, TaskStatus
from taskhub.domain.tasks.exceptions import TaskNotFoundError
from taskhub.domain.tasks.repositories import TaskRepository
from taskhub.infrastructure.db.models import Task
from taskhub.infrastructure.db.session import SessionFactory, session_scope
from taskhub.infrastructure.repositories.mapping import as_utc, is_row_id


def to_domain_task(row: Task) -> DomainTask:
    return DomainTask(
        id=row.id,
        owner_id=row.owner_id,
        title=row.title,
        description=row.description,
        status=TaskStatus(row.status),
        priority=row.priority,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def add(
        self,
        *,
        owner_id: int,
        title: str,
        description: str | None,
        status: TaskStatus,
        priority: int,
    ) -> DomainTask:
        with session_scope(self._session_factory) as session:
            row = Task(
                owner_id=owner_id,
                title=title,
                description=description,
                status=status.value,
                priority=priority,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return to_domain_task(row)

    def get(self, task_id: int) -> DomainTask | None:
        if not is_row_id(task_id):
            return None
        with session_scope(self._session_factory) as session:
            row = session.get(Task, task_id)
            return to_domain_task(row) if row else None

    def list_for_owner(self, owner_id: int, task_filter: TaskFilter) -> Sequence[DomainTask]:
        stmt = select(Task).where(Task.owner_id == owner_id)
        if task_filter.status is not None:
            stmt = stmt.where(Task.status == task_filter.status.value)
        if task_filter.min_priority is not None:
            stmt = stmt.where(Task.priority >= task_filter.min_priority)
        stmt = stmt.order_by(Task.priority.desc(), Task.created_at.desc(), Task.id.desc())

        with session_scope(self._session_factory) as session:
            return [to_domain_task(row) for row in session.scalars(stmt).all()]

    def save(self, task: DomainTask) -> DomainTask:
        if not is_row_id(task.id):
            raise TaskNotFoundError(task.id)
        with session_scope(self._session_factory) as session:
            row = session.get(Task, task.id)
            if row is None:
                raise TaskNotFoundError(task.id)
            row.title = task.title
            row.description = task.description
            row.status = task.status.value
            row.priority = task.priority
            row.updated_at = task.updated_at
            session.flush()
            session.refresh(row)
            return to_domain_task(row)

    def delete(self, task_id: int) -> bool:
        if not is_row_id(task_id):
            return False
        with session_scope(self._session_factory) as session:
            row = session.get(Task, task_id)
            if row is None:
                return False
            session.delete(row)
            return True
