from datetime import datetime
from typing import Tuple

from taskdesk.app.services.session_tokens import generate_session_token, session_expiry
from taskdesk.app.services.unit_of_work import UnitOfWork
from taskdesk.domain.entities import User


async def open_session(uow: UnitOfWork, user: User, now: datetime) -> Tuple[str, datetime]:
    """
    Mint a token and persist its session inside the caller's unit of work.

    Shared by login, registration and impersonation so all three follow the
    same token and expiry rules. The caller commits.
    """
    token = generate_session_token()
    expires_at = session_expiry(now)
    await uow.sessions.create(user.id, token, expires_at)
    return token, expires_at
