"""
Create an admin account. Run from project root:
  python -m scripts.create_admin USERNAME PASSWORD [--name NAME]

Self-registration only ever produces plain users, so the first admin has to
be seeded this way.
"""
import argparse
import asyncio
import logging
import sys

from taskdesk.adapter.database import create_engine, create_session_factory, create_tables
from taskdesk.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from taskdesk.app.services.password_hasher import hash_password
from taskdesk.config import ApplicationConfig
from taskdesk.domain.entities import User, UserRole

logger = logging.getLogger("create_admin")


async def create_admin(username: str, password: str, name: str) -> int:
    engine = create_engine(ApplicationConfig.DB_URI, ApplicationConfig.DB_CONNECT_TIMEOUT)
    try:
        await create_tables(engine)
        async with create_session_factory(engine)() as session:
            async with SqlAlchemyUnitOfWork(session) as uow:
                if await uow.users.get_by_username(username):
                    logger.warning(f"User '{username}' already exists")
                    return 1

                await uow.users.create(
                    User(
                        username=username,
                        password_hash=hash_password(password),
                        name=name,
                        role=UserRole.admin,
                    )
                )
                await uow.commit()
    finally:
        await engine.dispose()

    logger.info(f"Created admin '{username}'")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Taskdesk admin account.")
    parser.add_argument("username", help="Username (3-64 chars)")
    parser.add_argument("password", help="Password (min 6 chars)")
    parser.add_argument("--name", default="Administrator", help="Display name")
    args = parser.parse_args()

    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL, format="%(levelname)s %(message)s")

    username = args.username.strip()
    if not 3 <= len(username) <= 64:
        print("Username must be 3-64 characters.", file=sys.stderr)
        return 1
    if len(args.password) < 6:
        print("Password must be at least 6 characters.", file=sys.stderr)
        return 1

    return asyncio.run(create_admin(username, args.password, args.name))


if __name__ == "__main__":
    sys.exit(main())
