import logging

from taskdesk.app.repositories.errors import UniqueViolationError
from taskdesk.app.services.password_hasher import hash_password
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.base import utc_now
from taskdesk.domain.entities import User, UserRole
from taskdesk.domain.errors import ErrorCode
from taskdesk.libs.result import Error, Result, Return
from .dtos import AuthResult, RegisterCommand, UserInfo
from .session_issuer import open_session

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject a username that is already taken (DUPLICATE_USER)
    2. Hash password with bcrypt
    3. Create User with role forced to user
    4. Open a session for the new user (first login)
    5. Commit user and session together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResult]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_username(command.username)
            if existing_user:
                return Return.err(_duplicate_user())

            now = utc_now()
            user = User(
                username=command.username,
                password_hash=hash_password(command.password),
                name=command.name,
                role=UserRole.user,
                last_signed_in=now,
            )
            try:
                user = await self.uow.users.create(user)
            except UniqueViolationError:
                # Lost a race with a concurrent registration of the same name
                return Return.err(_duplicate_user())

            token, expires_at = await open_session(self.uow, user, now)

            await self.uow.commit()

            logger.info(f"Registered user {user.id}")
            return Return.ok(
                AuthResult(user=UserInfo.from_user(user), token=token, expires_at=expires_at)
            )


def _duplicate_user() -> Error:
    return Error(ErrorCode.DUPLICATE_USER, "Username is already taken")
