"""
Login Use Case

Verifies a username/password pair and opens a session.
"""

import logging

from taskdesk.app.services.password_hasher import burn_verification, verify_password
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.base import utc_now
from taskdesk.domain.errors import ErrorCode
from taskdesk.libs.result import Error, Result, Return
from .dtos import AuthResult, UserInfo
from .session_issuer import open_session

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error(ErrorCode.INVALID_CREDENTIALS, "Invalid username or password")


class LoginUseCase:
    """
    Use case for user login and session issuance.

    Business Rules:
    - Unknown username and wrong password return the same error
    - A throwaway bcrypt check runs for unknown usernames (uniform timing)
    - Blocked status is only disclosed once the password has verified
    - Creates a new session; other sessions of the user stay valid
    - Updates user.last_signed_in
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, password: str) -> Result[AuthResult]:
        """
        Execute login use case.

        Args:
            username: Account username
            password: Plain text password

        Returns:
            Result with AuthResult (user, token, expiry), or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_username(username)

            if user is None:
                burn_verification(password)
                logger.info("Login failed: unknown username")
                return Return.err(INVALID_CREDENTIALS)

            if not verify_password(password, user.password_hash):
                logger.info(f"Login failed: bad password for user {user.id}")
                return Return.err(INVALID_CREDENTIALS)

            if user.is_blocked:
                logger.warning(f"Login refused: user {user.id} is blocked")
                return Return.err(Error(ErrorCode.ACCOUNT_BLOCKED, "Account is blocked"))

            now = utc_now()
            token, expires_at = await open_session(self.uow, user, now)

            user.last_signed_in = now
            await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                AuthResult(user=UserInfo.from_user(user), token=token, expires_at=expires_at)
            )
