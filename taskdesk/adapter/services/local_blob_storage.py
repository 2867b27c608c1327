"""
Filesystem blob storage for evidence uploads.
"""

import asyncio
import logging
from pathlib import Path

from taskdesk.app.repositories.errors import StorageUnavailableError
from taskdesk.app.services.blob_storage import IBlobStorage

logger = logging.getLogger(__name__)


class LocalBlobStorage(IBlobStorage):
    """Store blobs under a base directory; URLs are base_url + key."""

    def __init__(self, base_path: str, base_url: str = "/files"):
        self.base_path = Path(base_path).resolve()
        self.base_url = base_url.rstrip("/")

    def _key_to_path(self, key: str) -> Path:
        path = (self.base_path / key).resolve()
        if not path.is_relative_to(self.base_path):
            raise ValueError(f"Blob key escapes storage root: {key}")
        return path

    async def put(self, key: str, data: bytes, content_type: str) -> str:
        path = self._key_to_path(key)
        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as exc:
            logger.error(f"Blob write failed for {key}: {exc}")
            raise StorageUnavailableError("Blob storage is unavailable") from exc
        return f"{self.base_url}/{key}"

    async def delete(self, key: str) -> bool:
        path = self._key_to_path(key)
        if not path.exists():
            return False
        path.unlink()
        return True

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
