from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from taskdesk.app.services.password_hasher import hash_password
from taskdesk.domain.entities import User, UserRole
from taskdesk.domain.identity import Identity


def _returns_argument(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork; create/update hand back the entity they receive"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_all = AsyncMock(return_value=[])
    uow.users.create = AsyncMock(side_effect=_returns_argument)
    uow.users.update = AsyncMock(side_effect=_returns_argument)
    uow.users.set_block_status = AsyncMock(return_value=True)

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock()
    uow.sessions.find_by_token = AsyncMock(return_value=None)
    uow.sessions.delete_by_token = AsyncMock(return_value=True)
    uow.sessions.delete_by_user_id = AsyncMock(return_value=0)

    uow.tasks = MagicMock()
    uow.tasks.get_by_id = AsyncMock(return_value=None)
    uow.tasks.get_all = AsyncMock(return_value=[])
    uow.tasks.get_by_assignee = AsyncMock(return_value=[])
    uow.tasks.create = AsyncMock(side_effect=_returns_argument)
    uow.tasks.update = AsyncMock(side_effect=_returns_argument)

    uow.task_evidences = MagicMock()
    uow.task_evidences.get_by_task_id = AsyncMock(return_value=[])
    uow.task_evidences.create = AsyncMock(side_effect=_returns_argument)

    uow.messages = MagicMock()
    uow.messages.get_by_id = AsyncMock(return_value=None)
    uow.messages.get_by_recipient = AsyncMock(return_value=[])
    uow.messages.create = AsyncMock(side_effect=_returns_argument)
    uow.messages.update = AsyncMock(side_effect=_returns_argument)

    return uow


@pytest.fixture
def make_user():
    """Build a User entity; the password is hashed with the minimum cost to keep tests fast"""

    def _make_user(username="alice", password="secret1", role=UserRole.user, is_blocked=False):
        return User(
            id=uuid4(),
            username=username,
            password_hash=hash_password(password, rounds=4),
            role=role,
            is_blocked=is_blocked,
        )

    return _make_user


@pytest.fixture
def admin_identity():
    return Identity(id=uuid4(), username="admin", role=UserRole.admin, name="Administrator")


@pytest.fixture
def user_identity():
    return Identity(id=uuid4(), username="alice", role=UserRole.user)
