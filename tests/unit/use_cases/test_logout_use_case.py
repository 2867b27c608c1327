import pytest

from taskdesk.app.use_cases.auth import LogoutUseCase


@pytest.mark.asyncio
async def test_logout_deletes_session(mock_uow):
    result = await LogoutUseCase(mock_uow).execute("a" * 64)

    assert result.is_ok()
    mock_uow.sessions.delete_by_token.assert_called_once_with("a" * 64)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_logout_unknown_session_still_succeeds(mock_uow):
    mock_uow.sessions.delete_by_token.return_value = False

    result = await LogoutUseCase(mock_uow).execute("b" * 64)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_logout_without_token_is_a_noop(mock_uow):
    result = await LogoutUseCase(mock_uow).execute(None)

    assert result.is_ok()
    mock_uow.sessions.delete_by_token.assert_not_called()
    mock_uow.commit.assert_not_called()
