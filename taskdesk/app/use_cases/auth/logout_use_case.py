from typing import Optional

from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.libs.result import Result, Return


class LogoutUseCase:
    """Deletes the session behind a token. Succeeds whether or not the session exists."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: Optional[str]) -> Result[None]:
        if not token:
            return Return.ok(None)

        async with self.uow:
            await self.uow.sessions.delete_by_token(token)
            await self.uow.commit()

        return Return.ok(None)
