from abc import ABC, abstractmethod

from taskdesk.app.repositories.message_repository import IMessageRepository
from taskdesk.app.repositories.session_repository import ISessionRepository
from taskdesk.app.repositories.task_evidence_repository import ITaskEvidenceRepository
from taskdesk.app.repositories.task_repository import ITaskRepository
from taskdesk.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    tasks: ITaskRepository
    task_evidences: ITaskEvidenceRepository
    messages: IMessageRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
