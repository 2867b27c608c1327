"""
Impersonate User Use Case

Lets an admin act as another user without that user's password.
"""

import logging
from typing import Optional
from uuid import UUID

from taskdesk.app.services.authorization import ensure_manageable_target, require_admin
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.app.use_cases.auth.dtos import AuthResult, UserInfo
from taskdesk.app.use_cases.auth.session_issuer import open_session
from taskdesk.domain.base import utc_now
from taskdesk.domain.errors import ErrorCode
from taskdesk.domain.identity import Identity
from taskdesk.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class ImpersonateUserUseCase:
    """
    Business Rules:
    - Admin only; the role gate runs before anything is read
    - Target must exist (NOT_FOUND), must not be an admin and must not be
      blocked (INVALID_TARGET)
    - Issues a session with the same token and expiry rules as login
    - The target's password is never requested or checked
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[Identity], target_user_id: UUID) -> Result[AuthResult]:
        error = require_admin(identity)
        if error:
            return Return.err(error)

        async with self.uow:
            target = await self.uow.users.get_by_id(target_user_id)
            error = ensure_manageable_target(target)
            if error:
                return Return.err(error)

            if target.is_blocked:
                return Return.err(
                    Error(ErrorCode.INVALID_TARGET, "Blocked accounts cannot be impersonated")
                )

            token, expires_at = await open_session(self.uow, target, utc_now())

            await self.uow.commit()

            logger.warning(f"Admin {identity.id} is impersonating user {target.id}")

            return Return.ok(
                AuthResult(user=UserInfo.from_user(target), token=token, expires_at=expires_at)
            )
