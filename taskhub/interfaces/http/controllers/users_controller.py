# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from taskhub.application.use_cases.users.get_user import GetUserUseCase, ListUsersUseCase
from taskhub.interfaces.http.dto.users import UserListResponseDTO, UserResponseDTO
from taskhub.interfaces.http.guard import AuthorizationGuard, current_user


class UsersController:
    """Read-only views of registered users. Every route requires a bearer token."""

    def __init__(
        self,
        *,
        guard: AuthorizationGuard,
        get_user_use_case: GetUserUseCase,
        list_users_use_case: ListUsersUseCase,
    ) -> None:
        self._guard = guard
        self._get_user_use_case = get_user_use_case
        self._list_users_use_case = list_users_use_case

    def me(self) -> Response:
        return jsonify(UserResponseDTO.from_user(current_user()).model_dump(mode="json"))

    def list_users(self) -> Response:
        users = self._list_users_use_case.execute()
        payload = UserListResponseDTO(items=[UserResponseDTO.from_user(u) for u in users])
        return jsonify(payload.model_dump(mode="json"))

    def get_user(self, user_id: int) -> Response:
        user = self._get_user_use_case.execute(user_id)
        return jsonify(UserResponseDTO.from_user(user).model_dump(mode="json"))

    def as_blueprint(self, url_prefix: str = "/api") -> Blueprint:
        protect = self._guard.protect
        bp = Blueprint("users", __name__, url_prefix=f"{url_prefix}/users")
        bp.add_url_rule("/me", view_func=protect(self.me), methods=["GET"], endpoint="me")
        bp.add_url_rule(
            "", view_func=protect(self.list_users), methods=["GET"], endpoint="list_users"
        )
        bp.add_url_rule(
            "/<int:user_id>",
            view_func=protect(self.get_user),
            methods=["GET"],
            endpoint="get_user",
        )
        return bp
