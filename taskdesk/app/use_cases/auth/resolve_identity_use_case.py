"""
Resolve Identity Use Case

Maps an inbound session token to the authenticated identity, if any.
"""

import logging
from typing import Optional

from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.base import utc_now
from taskdesk.domain.identity import Identity

logger = logging.getLogger(__name__)


class ResolveIdentityUseCase:
    """
    Business Rules:
    - Missing, unknown or expired tokens resolve to None (not an error)
    - An expired session is deleted on first access (lazy expiry)
    - Sessions of blocked or missing users resolve to None, so a block
      takes effect on the very next request
    - No side effects besides the expired-session deletion
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: Optional[str]) -> Optional[Identity]:
        if not token:
            return None

        async with self.uow:
            session = await self.uow.sessions.find_by_token(token)
            if session is None:
                return None

            if session.is_expired(utc_now()):
                await self.uow.sessions.delete_by_token(token)
                await self.uow.commit()
                logger.debug(f"Deleted expired session {session.id}")
                return None

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None or user.is_blocked:
                return None

            return Identity.from_user(user)
