"""Photo upload handling."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Protocol
from urllib.parse import urlsplit
from uuid import uuid4

from staybook.errors import PhotoDownloadError, ValidationError

_logger = logging.getLogger(__name__)

MAX_UPLOAD_FILES = 100
_DEFAULT_LINK_SUFFIX = ".jpg"


class ImageDownloader(Protocol):
    """Interface for fetching remote images."""

    async def download(self, url: str) -> bytes:
        """Download an image and return its bytes."""


class PhotoStorage(Protocol):
    """Interface for storing photo files."""

    def save(self, name: str, content: bytes) -> str:
        """Store content under ``name`` and return the stored name."""


@dataclass
class PhotoService:
    """Stores uploaded and linked photos under generated names."""

    downloader: ImageDownloader
    storage: PhotoStorage
    clock: Callable[[], float] = time.time

    async def upload_by_link(self, link: str) -> str:
        """Download a photo from ``link`` and return its stored name."""
        name = f"photo{int(self.clock() * 1000)}{_link_suffix(link)}"
        try:
            content = await self.downloader.download(link)
        except Exception as exc:
            _logger.exception("Image download failed: link=%s", link)
            raise PhotoDownloadError() from exc
        stored = self.storage.save(name, content)
        _logger.info("Saved image as %s", stored)
        return stored

    def upload_files(self, files: list[tuple[str, bytes]]) -> list[str]:
        """Store uploaded files, keeping each original extension."""
        if len(files) > MAX_UPLOAD_FILES:
            raise ValidationError(f"At most {MAX_UPLOAD_FILES} photos per upload")
        stored = []
        for original_name, content in files:
            suffix = PurePosixPath(original_name.replace("\\", "/")).suffix
            stored.append(self.storage.save(f"{uuid4().hex}{suffix}", content))
        return stored


def _link_suffix(link: str) -> str:
    return PurePosixPath(urlsplit(link).path).suffix or _DEFAULT_LINK_SUFFIX
