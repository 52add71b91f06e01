from __future__ import annotations

from datetime import UTC, datetime

import pytest

from taskhub.application.use_cases.tasks import (
    CreateTaskInput,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from taskhub.domain.exceptions import InvariantViolationError
from taskhub.domain.tasks.entities import Task, TaskFilter, TaskStatus
from taskhub.domain.tasks.exceptions import TaskNotFoundError

from .fakes import InMemoryTaskRepository

ALICE = 1
BOB = 2


@pytest.fixture()
def tasks() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


def _task(**overrides) -> Task:
    now = datetime.now(UTC)
    fields = {
        "id": 1,
        "owner_id": ALICE,
        "title": "Write report",
        "description": None,
        "status": TaskStatus.PENDING,
        "priority": 3,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Task(**fields)


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"title": ""}, "title"),
        ({"title": "   "}, "title"),
        ({"title": "x" * 256}, "title"),
        ({"description": "x" * 2001}, "description"),
        ({"priority": -1}, "priority"),
        ({"priority": 11}, "priority"),
    ],
)
def test_task_invariants(overrides: dict, field: str) -> None:
    with pytest.raises(InvariantViolationError) as exc_info:
        _task(**overrides)

    assert exc_info.value.field == field
    assert exc_info.value.status == 400


def test_status_string_is_coerced_to_enum() -> None:
    assert _task(status="COMPLETED").status is TaskStatus.COMPLETED


def test_apply_rejects_immutable_fields() -> None:
    with pytest.raises(InvariantViolationError):
        _task().apply({"owner_id": BOB}, now=datetime.now(UTC))


def test_apply_revalidates_changes() -> None:
    with pytest.raises(InvariantViolationError):
        _task().apply({"priority": 42}, now=datetime.now(UTC))


def test_create_and_get(tasks: InMemoryTaskRepository) -> None:
    created = CreateTaskUseCase(tasks=tasks).execute(
        ALICE, CreateTaskInput(title="Buy milk", priority=5)
    )

    assert created.owner_id == ALICE
    assert created.status is TaskStatus.PENDING
    assert GetTaskUseCase(tasks=tasks).execute(ALICE, created.id) == created


def test_other_owner_sees_not_found(tasks: InMemoryTaskRepository) -> None:
    created = CreateTaskUseCase(tasks=tasks).execute(ALICE, CreateTaskInput(title="Private"))

    for use_case in (GetTaskUseCase(tasks=tasks), DeleteTaskUseCase(tasks=tasks)):
        with pytest.raises(TaskNotFoundError):
            use_case.execute(BOB, created.id)
    with pytest.raises(TaskNotFoundError):
        UpdateTaskUseCase(tasks=tasks).execute(BOB, created.id, {"title": "Mine now"})

    assert tasks.get(created.id) == created


def test_list_orders_by_priority_then_newest(tasks: InMemoryTaskRepository) -> None:
    create = CreateTaskUseCase(tasks=tasks)
    low = create.execute(ALICE, CreateTaskInput(title="low", priority=1))
    high_old = create.execute(ALICE, CreateTaskInput(title="high old", priority=7))
    high_new = create.execute(ALICE, CreateTaskInput(title="high new", priority=7))
    create.execute(BOB, CreateTaskInput(title="not mine", priority=10))

    listed = ListTasksUseCase(tasks=tasks).execute(ALICE)

    assert [t.id for t in listed] == [high_new.id, high_old.id, low.id]


def test_list_filters(tasks: InMemoryTaskRepository) -> None:
    create = CreateTaskUseCase(tasks=tasks)
    done = create.execute(ALICE, CreateTaskInput(title="done", status=TaskStatus.COMPLETED))
    create.execute(ALICE, CreateTaskInput(title="todo", priority=9))
    list_tasks = ListTasksUseCase(tasks=tasks)

    by_status = list_tasks.execute(ALICE, TaskFilter(status=TaskStatus.COMPLETED))
    by_priority = list_tasks.execute(ALICE, TaskFilter(min_priority=5))

    assert [t.id for t in by_status] == [done.id]
    assert [t.title for t in by_priority] == ["todo"]


def test_update_is_partial(tasks: InMemoryTaskRepository) -> None:
    created = CreateTaskUseCase(tasks=tasks).execute(
        ALICE, CreateTaskInput(title="Draft", description="first", priority=2)
    )

    updated = UpdateTaskUseCase(tasks=tasks).execute(
        ALICE, created.id, {"status": TaskStatus.IN_PROGRESS}
    )

    assert updated.status is TaskStatus.IN_PROGRESS
    assert updated.title == "Draft"
    assert updated.description == "first"
    assert updated.updated_at >= created.updated_at


def test_empty_update_returns_task_unchanged(tasks: InMemoryTaskRepository) -> None:
    created = CreateTaskUseCase(tasks=tasks).execute(ALICE, CreateTaskInput(title="Same"))

    assert UpdateTaskUseCase(tasks=tasks).execute(ALICE, created.id, {}) == created


def test_delete_removes_task(tasks: InMemoryTaskRepository) -> None:
    created = CreateTaskUseCase(tasks=tasks).execute(ALICE, CreateTaskInput(title="Gone"))

    DeleteTaskUseCase(tasks=tasks).execute(ALICE, created.id)

    assert tasks.get(created.id) is None
    with pytest.raises(TaskNotFoundError):
        DeleteTaskUseCase(tasks=tasks).execute(ALICE, created.id)
