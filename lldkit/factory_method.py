"""Factory method: choose a storage back end by type."""

from __future__ import annotations

import os
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


class StorageError(Exception):
    """Raised when storage cannot be created, written or read."""


class StorageType(IntEnum):
    DISK = 1
    MEMORY = 2


class Storage(ABC):
    """Keeps a single string."""

    @abstractmethod
    def save_data(self, data: str) -> None:
        """Store the string, replacing what was there."""

    @abstractmethod
    def get_data(self) -> str:
        """Return the stored string."""


class DiskStorage(Storage):
    """Keeps the string in a file; a fresh temporary file if none is given."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        if path is None:
            fd, name = tempfile.mkstemp(prefix="lldkit-", suffix=".txt")
            os.close(fd)
            path = name
        self.path = Path(path)

    def save_data(self, data: str) -> None:
        try:
            self.path.write_text(data, encoding="utf-8")
        except OSError as err:
            raise StorageError(f"cannot write {self.path}: {err}") from err

    def get_data(self) -> str:
        if not self.path.exists():
            return ""
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as err:
            raise StorageError(f"cannot read {self.path}: {err}") from err


@dataclass
class MemoryStorage(Storage):
    """Keeps the string in memory."""

    data: str = ""

    def save_data(self, data: str) -> None:
        self.data = data

    def get_data(self) -> str:
        return self.data


def new_storage(storage_type: StorageType | int) -> Storage:
    """Create the storage of the given type."""
    if storage_type == StorageType.DISK:
        return DiskStorage()
    if storage_type == StorageType.MEMORY:
        return MemoryStorage()
    raise StorageError(f"invalid storage type, storage type: {storage_type}")