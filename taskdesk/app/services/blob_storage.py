from abc import ABC, abstractmethod


class IBlobStorage(ABC):
    """Blob storage interface for uploaded evidence files"""

    @abstractmethod
    async def put(self, key: str, data: bytes, content_type: str) -> str:
        """Store bytes under key and return the URL clients use to fetch them"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove a stored blob. Returns True if it existed."""
        pass
