"""
Persistence failures raised by repository implementations.

Repositories translate driver exceptions into these so use cases never
depend on the database library.
"""


class RepositoryError(Exception):
    """Base class for persistence failures"""


class StorageUnavailableError(RepositoryError):
    """The backing store could not be reached or did not answer in time. Retryable."""


class UniqueViolationError(RepositoryError):
    """A write collided with a unique constraint"""
