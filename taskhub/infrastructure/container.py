# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine

from taskhub.application.services.password_hashing import WerkzeugPasswordHasher
from taskhub.application.services.tokens import JwtTokenIssuer
from taskhub.application.use_cases.tasks import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from taskhub.application.use_cases.users import (
    GetUserUseCase,
    ListUsersUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from taskhub.infrastructure.db.session import SessionFactory
from taskhub.infrastructure.observability import HttpMetrics
from taskhub.infrastructure.repositories.tasks import SqlAlchemyTaskRepository
from taskhub.infrastructure.repositories.users import SqlAlchemyUserRepository
from taskhub.interfaces.http.controllers import (
    AuthController,
    MiscController,
    TasksController,
    UsersController,
)
from taskhub.interfaces.http.guard import AuthorizationGuard
from taskhub.shared.config import AppConfig
from taskhub.shared.middleware.rate_limit import InMemoryRateLimiter


class Container:
    """Object graph of one application instance."""

    def __init__(
        self, config: AppConfig, *, engine: Engine, session_factory: SessionFactory
    ) -> None:
        self.config = config
        self.engine = engine
        self.session_factory = session_factory

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        auth = self.config.auth
        return JwtTokenIssuer(
            secret=auth.jwt_secret,
            algorithm=auth.jwt_algorithm,
            lifetime=auth.token_lifetime,
            leeway=timedelta(seconds=auth.jwt_leeway_seconds),
        )

    @cached_property
    def metrics(self) -> HttpMetrics | None:
        observability = self.config.observability
        if not observability.metrics_enabled:
            return None
        return HttpMetrics(observability.service_name)

    @cached_property
    def rate_limiter(self) -> InMemoryRateLimiter | None:
        security = self.config.security
        if not security.enable_rate_limit:
            return None
        return InMemoryRateLimiter(security.rate_limit_requests, security.rate_limit_window)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def task_repository(self) -> SqlAlchemyTaskRepository:
        return SqlAlchemyTaskRepository(self.session_factory)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
        )

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(users=self.user_repository)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_repository)

    # Task use cases

    @cached_property
    def create_task_use_case(self) -> CreateTaskUseCase:
        return CreateTaskUseCase(tasks=self.task_repository)

    @cached_property
    def list_tasks_use_case(self) -> ListTasksUseCase:
        return ListTasksUseCase(tasks=self.task_repository)

    @cached_property
    def get_task_use_case(self) -> GetTaskUseCase:
        return GetTaskUseCase(tasks=self.task_repository)

    @cached_property
    def update_task_use_case(self) -> UpdateTaskUseCase:
        return UpdateTaskUseCase(tasks=self.task_repository)

    @cached_property
    def delete_task_use_case(self) -> DeleteTaskUseCase:
        return DeleteTaskUseCase(tasks=self.task_repository)

    # HTTP

    @cached_property
    def guard(self) -> AuthorizationGuard:
        return AuthorizationGuard(
            tokens=self.token_issuer,
            users=self.user_repository,
            metrics=self.metrics,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            auth_config=self.config.auth,
            rate_limiter=self.rate_limiter,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            guard=self.guard,
            get_user_use_case=self.get_user_use_case,
            list_users_use_case=self.list_users_use_case,
        )

    @cached_property
    def tasks_controller(self) -> TasksController:
        return TasksController(
            guard=self.guard,
            create_task=self.create_task_use_case,
            list_tasks=self.list_tasks_use_case,
            get_task=self.get_task_use_case,
            update_task=self.update_task_use_case,
            delete_task=self.delete_task_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(config=self.config, engine=self.engine, metrics=self.metrics)
