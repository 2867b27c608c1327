"""
Block User Use Case

Admin switch that locks a user out of the application.
"""

import logging
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from taskdesk.app.services.authorization import ensure_manageable_target, require_admin
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Result, Return

logger = logging.getLogger(__name__)


class BlockStatusResponse(BaseModel):
    """Response DTO for block and unblock"""

    user_id: UUID
    is_blocked: bool
    sessions_revoked: int


class BlockUserUseCase:
    """
    Block or unblock a user.

    Business Rules:
    - Admin only
    - Target must exist (NOT_FOUND) and must not be an admin (INVALID_TARGET)
    - Blocking deletes every session of the target; even without that,
      the request authenticator refuses sessions of blocked users
    - Idempotent: blocking a blocked user succeeds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def block(self, identity: Optional[Identity], target_user_id: UUID) -> Result[BlockStatusResponse]:
        return await self._set_block_status(identity, target_user_id, True)

    async def unblock(self, identity: Optional[Identity], target_user_id: UUID) -> Result[BlockStatusResponse]:
        return await self._set_block_status(identity, target_user_id, False)

    async def _set_block_status(
        self, identity: Optional[Identity], target_user_id: UUID, is_blocked: bool
    ) -> Result[BlockStatusResponse]:
        error = require_admin(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            target = await self.uow.users.get_by_id(target_user_id)
            error = ensure_manageable_target(target)
            if error:
                return Return.err(error)

            await self.uow.users.set_block_status(target_user_id, is_blocked)

            sessions_revoked = 0
            if is_blocked:
                sessions_revoked = await self.uow.sessions.delete_by_user_id(target_user_id)

            await self.uow.commit()

            action = "blocked" if is_blocked else "unblocked"
            logger.warning(f"Admin {identity.id} {action} user {target_user_id}")

            return Return.ok(
                BlockStatusResponse(
                    user_id=target_user_id,
                    is_blocked=is_blocked,
                    sessions_revoked=sessions_revoked,
                )
            )
