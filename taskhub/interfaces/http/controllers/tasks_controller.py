# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Task CRUD for the authenticated user.

Tasks are scoped to their owner: another user's task id answers exactly like
an id that does not exist.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from taskhub.application.use_cases.tasks import (
    CreateTaskInput,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from taskhub.domain.tasks.entities import Task
from taskhub.interfaces.http.dto.tasks import (
    CreateTaskRequestDTO,
    TaskListQueryDTO,
    TaskListResponseDTO,
    TaskResponseDTO,
    UpdateTaskRequestDTO,
)
from taskhub.interfaces.http.guard import AuthorizationGuard, current_user
from taskhub.shared.errors.validation import raise_validation_error


def _json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _task_json(task: Task) -> dict[str, Any]:
    return TaskResponseDTO.from_task(task).model_dump(mode="json")


class TasksController:
    def __init__(
        self,
        *,
        guard: AuthorizationGuard,
        create_task: CreateTaskUseCase,
        list_tasks: ListTasksUseCase,
        get_task: GetTaskUseCase,
        update_task: UpdateTaskUseCase,
        delete_task: DeleteTaskUseCase,
    ) -> None:
        self._guard = guard
        self._create_task = create_task
        self._list_tasks = list_tasks
        self._get_task = get_task
        self._update_task = update_task
        self._delete_task = delete_task

    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateTaskRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        task = self._create_task.execute(
            current_user().id,
            CreateTaskInput(
                title=dto.title,
                description=dto.description,
                status=dto.status,
                priority=dto.priority,
            ),
        )
        return jsonify(_task_json(task)), 201

    def list(self) -> Response:
        try:
            query = TaskListQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        tasks = self._list_tasks.execute(current_user().id, query.to_filter())
        payload = TaskListResponseDTO(items=[TaskResponseDTO.from_task(t) for t in tasks])
        return jsonify(payload.model_dump(mode="json"))

    def get(self, task_id: int) -> Response:
        return jsonify(_task_json(self._get_task.execute(current_user().id, task_id)))

    def update(self, task_id: int) -> Response:
        try:
            dto = UpdateTaskRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        task = self._update_task.execute(current_user().id, task_id, dto.changes())
        return jsonify(_task_json(task))

    def delete(self, task_id: int) -> tuple[str, int]:
        self._delete_task.execute(current_user().id, task_id)
        return "", 204

    def as_blueprint(self, url_prefix: str = "/api") -> Blueprint:
        protect = self._guard.protect
        bp = Blueprint("tasks", __name__, url_prefix=f"{url_prefix}/tasks")
        bp.add_url_rule("", view_func=protect(self.create), methods=["POST"], endpoint="create")
        bp.add_url_rule("", view_func=protect(self.list), methods=["GET"], endpoint="list")
        bp.add_url_rule(
            "/<int:task_id>", view_func=protect(self.get), methods=["GET"], endpoint="get"
        )
        bp.add_url_rule(
            "/<int:task_id>",
            view_func=protect(self.update),
            methods=["PATCH"],
            endpoint="update",
        )
        bp.add_url_rule(
            "/<int:task_id>",
            view_func=protect(self.delete),
            methods=["DELETE"],
            endpoint="delete",
        )
        return bp
