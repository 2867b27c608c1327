from sqlmodel.ext.asyncio.session import AsyncSession

from taskdesk.adapter.repositories.message_repository import MessageRepository
from taskdesk.adapter.repositories.session_repository import SessionRepository
from taskdesk.adapter.repositories.storage_guard import storage_guard
from taskdesk.adapter.repositories.task_evidence_repository import TaskEvidenceRepository
from taskdesk.adapter.repositories.task_repository import TaskRepository
from taskdesk.adapter.repositories.user_repository import UserRepository
from taskdesk.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.tasks = TaskRepository(self.session)
        self.task_evidences = TaskEvidenceRepository(self.session)
        self.messages = MessageRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @storage_guard
    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
