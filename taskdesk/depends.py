from typing import Optional

from fastapi import Depends, Request

from taskdesk.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskdesk.api.utils.cookies import read_session_token
from taskdesk.app.services.blob_storage import IBlobStorage
from taskdesk.app.use_cases.auth import ResolveIdentityUseCase
from taskdesk.domain.identity import Identity


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_blob_storage(request: Request) -> IBlobStorage:
    return request.app.state.blob_storage


def get_session_token(request: Request) -> Optional[str]:
    return read_session_token(request)


async def get_identity(
    token: Optional[str] = Depends(get_session_token),
    uow=Depends(get_unit_of_work),
) -> Optional[Identity]:
    """
    Dependency resolving the session cookie to the caller's identity.

    Returns None for anonymous callers; each use case decides whether that
    is acceptable, so UNAUTHENTICATED is reported by the authorization gates.
    """
    return await ResolveIdentityUseCase(uow).execute(token)
