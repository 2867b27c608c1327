from unittest.mock import AsyncMock

import pytest

from taskdesk.app.repositories.errors import UniqueViolationError
from taskdesk.app.services.password_hasher import verify_password
from taskdesk.app.services.session_tokens import session_ttl
from taskdesk.app.use_cases.auth import RegisterCommand, RegisterUseCase
from taskdesk.domain.entities import UserRole
from taskdesk.domain.errors import ErrorCode


@pytest.mark.asyncio
async def test_register_creates_user_and_session(mock_uow):
    use_case = RegisterUseCase(mock_uow)

    result = await use_case.execute(
        RegisterCommand(username="alice", password="secret1", name="Alice")
    )

    assert result.is_ok()
    data = result.value
    assert data.user.username == "alice"
    assert data.user.role == UserRole.user
    assert data.user.is_blocked is False
    assert len(data.token) == 64

    created_user = mock_uow.users.create.call_args.args[0]
    assert created_user.password_hash != "secret1"
    assert verify_password("secret1", created_user.password_hash)

    user_id, token, expires_at = mock_uow.sessions.create.call_args.args
    assert user_id == created_user.id
    assert token == data.token
    assert expires_at == data.expires_at
    assert expires_at - created_user.last_signed_in == session_ttl()

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_register_duplicate_username(mock_uow, make_user):
    mock_uow.users.get_by_username.return_value = make_user(username="alice")
    use_case = RegisterUseCase(mock_uow)

    result = await use_case.execute(RegisterCommand(username="alice", password="secret1"))

    assert result.is_err()
    assert result.error.code == ErrorCode.DUPLICATE_USER
    mock_uow.users.create.assert_not_called()
    mock_uow.sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_register_race_on_unique_index(mock_uow):
    """A concurrent registration that wins the insert surfaces as DUPLICATE_USER"""
    mock_uow.users.create = AsyncMock(side_effect=UniqueViolationError("users.username"))
    use_case = RegisterUseCase(mock_uow)

    result = await use_case.execute(RegisterCommand(username="alice", password="secret1"))

    assert result.is_err()
    assert result.error.code == ErrorCode.DUPLICATE_USER
    mock_uow.sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()
