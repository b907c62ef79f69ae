"""
Blob storage for uploaded resumes.

The API only keeps the URL a store hands back. LocalBlobStore writes under
UPLOAD_DIR and the app serves that directory at UPLOAD_BASE_URL.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class BlobStore(ABC):
    """Minimal interface the resume service needs from a file store."""

    @abstractmethod
    def put(self, name: str, data: bytes, content_type: str) -> str:
        """Store data under name and return its public URL."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, url: str) -> None:
        """Remove the blob behind a URL returned by put()."""
        raise NotImplementedError


class LocalBlobStore(BlobStore):
    def __init__(self, root_dir: str, base_url: str):
        self.root = Path(root_dir)
        self.root.mkdir(parents=True, exist_ok=True)
        self.base_url = base_url.rstrip("/")

    def _path_for(self, name: str) -> Path:
        # Only the final path component is used, so names cannot escape root
        return self.root / Path(name).name

    def put(self, name: str, data: bytes, content_type: str) -> str:
        path = self._path_for(name)
        with open(path, "wb") as f:
            f.write(data)
        logger.info(f"Blob stored: name={path.name}, bytes={len(data)}, content_type={content_type}")
        return f"{self.base_url}/{path.name}"

    def delete(self, url: str) -> None:
        path = self._path_for(url.rsplit("/", 1)[-1])
        if path.exists():
            path.unlink()
            logger.info(f"Blob deleted: name={path.name}")
        else:
            logger.warning(f"Blob already missing: name={path.name}")
