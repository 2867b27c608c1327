from uuid import uuid4

import pytest

from taskdesk.app.use_cases.tasks import (
    CreateTaskCommand,
    CreateTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    MarkTaskCompletedUseCase,
    UpdateTaskCommand,
    UpdateTaskUseCase,
)
from taskdesk.domain.entities import Task, TaskStatus
from taskdesk.domain.errors import ErrorCode


def _task(assignee_id, creator_id=None):
    return Task(
        id=uuid4(),
        title="Check the signs",
        assigned_to_user_id=assignee_id,
        created_by_user_id=creator_id or uuid4(),
    )


@pytest.mark.asyncio
async def test_list_tasks_scoped_to_assignee(mock_uow, user_identity):
    mock_uow.tasks.get_by_assignee.return_value = [_task(user_identity.id)]

    result = await ListTasksUseCase(mock_uow).execute(user_identity)

    assert len(result.value) == 1
    mock_uow.tasks.get_by_assignee.assert_called_once_with(user_identity.id)
    mock_uow.tasks.get_all.assert_not_called()


@pytest.mark.asyncio
async def test_list_tasks_admin_sees_all(mock_uow, admin_identity):
    mock_uow.tasks.get_all.return_value = [_task(uuid4()), _task(uuid4())]

    result = await ListTasksUseCase(mock_uow).execute(admin_identity)

    assert len(result.value) == 2
    mock_uow.tasks.get_by_assignee.assert_not_called()


@pytest.mark.asyncio
async def test_list_tasks_anonymous(mock_uow):
    result = await ListTasksUseCase(mock_uow).execute(None)

    assert result.error.code == ErrorCode.UNAUTHENTICATED


@pytest.mark.asyncio
async def test_create_task(mock_uow, make_user, admin_identity):
    assignee = make_user(username="alice")
    mock_uow.users.get_by_id.return_value = assignee

    result = await CreateTaskUseCase(mock_uow).execute(
        admin_identity, CreateTaskCommand(title="Inspect", assigned_to_user_id=assignee.id)
    )

    assert result.is_ok()
    assert result.value.assigned_to_user_id == assignee.id
    assert result.value.created_by_user_id == admin_identity.id
    assert result.value.status == TaskStatus.pending
    assert result.value.is_completed is False
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_task_forbidden_for_users(mock_uow, user_identity):
    result = await CreateTaskUseCase(mock_uow).execute(
        user_identity, CreateTaskCommand(title="Inspect", assigned_to_user_id=user_identity.id)
    )

    assert result.error.code == ErrorCode.FORBIDDEN
    mock_uow.tasks.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_task_unknown_assignee(mock_uow, admin_identity):
    result = await CreateTaskUseCase(mock_uow).execute(
        admin_identity, CreateTaskCommand(title="Inspect", assigned_to_user_id=uuid4())
    )

    assert result.error.code == ErrorCode.NOT_FOUND
    mock_uow.tasks.create.assert_not_called()


@pytest.mark.asyncio
async def test_get_foreign_task_is_forbidden(mock_uow, user_identity):
    mock_uow.tasks.get_by_id.return_value = _task(uuid4())

    result = await GetTaskUseCase(mock_uow).execute(user_identity, uuid4())

    assert result.error.code == ErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_missing_task_does_not_leak_existence_to_users(mock_uow, user_identity, admin_identity):
    as_user = await GetTaskUseCase(mock_uow).execute(user_identity, uuid4())
    as_admin = await GetTaskUseCase(mock_uow).execute(admin_identity, uuid4())

    assert as_user.error.code == ErrorCode.FORBIDDEN
    assert as_admin.error.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_mark_completed_by_assignee(mock_uow, user_identity):
    task = _task(user_identity.id)
    mock_uow.tasks.get_by_id.return_value = task

    result = await MarkTaskCompletedUseCase(mock_uow).execute(user_identity, task.id)

    assert result.value.is_completed is True
    assert result.value.status == TaskStatus.in_progress
    assert result.value.completed_at is not None
    mock_uow.tasks.update.assert_called_once_with(task)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_mark_completed_on_foreign_task(mock_uow, user_identity):
    task = _task(uuid4())
    mock_uow.tasks.get_by_id.return_value = task

    result = await MarkTaskCompletedUseCase(mock_uow).execute(user_identity, task.id)

    assert result.error.code == ErrorCode.FORBIDDEN
    assert task.is_completed is False
    mock_uow.tasks.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_task_to_verified(mock_uow, admin_identity):
    task = _task(uuid4())
    mock_uow.tasks.get_by_id.return_value = task

    result = await UpdateTaskUseCase(mock_uow).execute(
        admin_identity, task.id, UpdateTaskCommand(status=TaskStatus.verified)
    )

    assert result.value.status == TaskStatus.verified
    assert result.value.verified_at is not None
    assert result.value.title == "Check the signs"


@pytest.mark.asyncio
async def test_update_task_forbidden_for_assignee(mock_uow, user_identity):
    mock_uow.tasks.get_by_id.return_value = _task(user_identity.id)

    result = await UpdateTaskUseCase(mock_uow).execute(
        user_identity, uuid4(), UpdateTaskCommand(status=TaskStatus.verified)
    )

    assert result.error.code == ErrorCode.FORBIDDEN
    mock_uow.tasks.update.assert_not_called()
