import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from taskdesk.adapter.services.local_blob_storage import LocalBlobStorage
from taskdesk.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskdesk.app.services.password_hasher import hash_password
from taskdesk.config import ApplicationConfig
from taskdesk.depends import get_blob_storage, get_unit_of_work
from taskdesk.domain.entities import User, UserRole
from tests.utils.session_cookies import ADMIN_PASSWORD, ADMIN_USERNAME


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def blob_storage(tmp_path):
    return LocalBlobStorage(str(tmp_path / "blobs"), "/files")


@pytest_asyncio.fixture
async def client(db_session, blob_storage):
    from taskdesk.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_blob_storage] = lambda: blob_storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_user(db_session):
    """
    Seeded admin account (admins cannot self-register).

    Returns the credentials, not the entity: request-scoped rollbacks expire it.
    """
    admin = User(
        username=ADMIN_USERNAME,
        password_hash=hash_password(ADMIN_PASSWORD, rounds=4),
        name="Administrator",
        role=UserRole.admin,
    )
    db_session.add(admin)
    await db_session.commit()
    return ADMIN_USERNAME, ADMIN_PASSWORD
