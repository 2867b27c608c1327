import functools
import logging

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from taskdesk.app.repositories.errors import StorageUnavailableError

logger = logging.getLogger(__name__)

UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError, ConnectionError, TimeoutError)


def storage_guard(func):
    """Re-raise connectivity failures of an async repository method as StorageUnavailableError."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except UNAVAILABLE_ERRORS as exc:
            logger.error(f"Storage unavailable in {func.__qualname__}: {exc.__class__.__name__}")
            raise StorageUnavailableError("Storage is unavailable") from exc

    return wrapper
