"""Filesystem photo storage."""

from dataclasses import dataclass
from pathlib import Path

from staybook.errors import ValidationError
from staybook.services.photos import PhotoStorage


@dataclass
class LocalPhotoStorage(PhotoStorage):
    """Stores photos as flat files in a single directory."""

    root: Path

    @classmethod
    def create(cls, root: Path) -> "LocalPhotoStorage":
        """Create the storage, making sure the directory exists."""
        root.mkdir(parents=True, exist_ok=True)
        return cls(root=root)

    def save(self, name: str, content: bytes) -> str:
        """Write ``content`` to ``root/name`` and return ``name``."""
        if not name or Path(name).name != name:
            raise ValidationError("Invalid photo name")
        (self.root / name).write_bytes(content)
        return name
