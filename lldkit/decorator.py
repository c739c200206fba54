"""Decorator pattern: stack compression and encoding over a file."""

from __future__ import annotations

import base64
import binascii
import contextlib
import os
import zlib
from abc import ABC, abstractmethod
from pathlib import Path


class DataSource(ABC):
    """Something that text can be written to and read back from."""

    @abstractmethod
    def write_data(self, data: str) -> None:
        """Store the text."""

    @abstractmethod
    def read_data(self) -> str:
        """Return the stored text."""


class FileDataSource(DataSource):
    """Keeps text in a file."""

    def __init__(self, file_name: str | os.PathLike[str]) -> None:
        self.file_name = Path(file_name)

    def write_data(self, data: str) -> None:
        # A failed write is ignored; the next read reports the problem.
        with contextlib.suppress(OSError):
            self.file_name.write_bytes(data.encode("utf-8"))

    def read_data(self) -> str:
        return self.file_name.read_bytes().decode("utf-8", errors="replace")


class DataSourceDecorator(DataSource):
    """Wraps another data source and forwards to it."""

    def __init__(self, wrappee: DataSource) -> None:
        self.wrappee = wrappee

    def write_data(self, data: str) -> None:
        self.wrappee.write_data(data)

    def read_data(self) -> str:
        return self.wrappee.read_data()


def _b64decode(data: str) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as err:
        raise ValueError(f"illegal base64 data: {err}") from err


class CompressionDecorator(DataSourceDecorator):
    """Deflates text and stores it as base64."""

    def __init__(self, wrappee: DataSource, compression_level: int = -1) -> None:
        super().__init__(wrappee)
        self.compression_level = compression_level

    def write_data(self, data: str) -> None:
        self.wrappee.write_data(self._compress(data))

    def read_data(self) -> str:
        return self._decompress(self.wrappee.read_data())

    def _compress(self, data: str) -> str:
        compressor = zlib.compressobj(self.compression_level, zlib.DEFLATED, -15)
        raw = compressor.compress(data.encode("utf-8")) + compressor.flush()
        return base64.b64encode(raw).decode("ascii")

    def _decompress(self, data: str) -> str:
        raw = _b64decode(data)
        try:
            decompressor = zlib.decompressobj(-15)
            out = decompressor.decompress(raw) + decompressor.flush()
        except zlib.error as err:
            raise ValueError(f"corrupt compressed data: {err}") from err
        return out.decode("utf-8", errors="replace")


class EncryptionDecorator(DataSourceDecorator):
    """Shifts every byte up by one and stores the result as base64."""

    def write_data(self, data: str) -> None:
        self.wrappee.write_data(self._encode(data))

    def read_data(self) -> str:
        return self._decode(self.wrappee.read_data())

    @staticmethod
    def _encode(data: str) -> str:
        shifted = bytes((b + 1) % 256 for b in data.encode("utf-8"))
        return base64.b64encode(shifted).decode("ascii")

    @staticmethod
    def _decode(data: str) -> str:
        shifted = bytes((b - 1) % 256 for b in _b64decode(data))
        return shifted.decode("utf-8", errors="replace")