from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Registers every table on SQLModel.metadata
import taskdesk.domain.entities  # noqa: F401


def create_engine(db_uri: str, connect_timeout: float) -> AsyncEngine:
    """Engine whose connects give up after connect_timeout seconds instead of hanging."""
    connect_args = {}
    if db_uri.startswith("sqlite") or db_uri.startswith("postgresql+asyncpg"):
        connect_args["timeout"] = connect_timeout
    return create_async_engine(
        db_uri, echo=False, future=True, pool_pre_ping=True, connect_args=connect_args
    )


def create_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
