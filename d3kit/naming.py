"""Types shared by the naming service: open flags, seek origins and directory entries."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag

__all__ = [
    "NAME_LENGTH",
    "RAW_DIRENT_SIZE",
    "OpenOptions",
    "SeekOrigin",
    "FileType",
    "DirEntry",
    "RawDirent",
    "seek_origin",
]

NAME_LENGTH = 256
_LAYOUT = struct.Struct(f"<Q{NAME_LENGTH}s")
RAW_DIRENT_SIZE = _LAYOUT.size


class OpenOptions(IntFlag):
    """Option flags for opening objects."""

    READONLY = 1
    READWRITE = 2
    CREATE = 3
    EXCLUSIVE = 4
    DIRECTORY = 5


class SeekOrigin(IntEnum):
    """Origin for a seek operation."""

    START = 1
    END = 2
    CURRENT = 3


def seek_origin(value: int) -> SeekOrigin:
    """Decode a seek origin, falling back to ``START`` for unknown values."""
    try:
        return SeekOrigin(value)
    except ValueError:
        return SeekOrigin.START


class FileType(IntEnum):
    """Kinds of directory entries."""

    DIRECTORY = 4
    REGULAR = 8
    LINK = 10


@dataclass
class RawDirent:
    """Fixed-size directory entry record exchanged with the kernel."""

    d_type: int = 0
    d_name: bytes = bytes(NAME_LENGTH)

    def __post_init__(self) -> None:
        if not 0 <= self.d_type < 1 << 64:
            raise ValueError(f"d_type out of range: {self.d_type}")
        name = bytes(self.d_name)
        if len(name) > NAME_LENGTH:
            raise ValueError(f"name longer than {NAME_LENGTH} bytes")
        self.d_name = name.ljust(NAME_LENGTH, b"\0")

    def to_bytes(self) -> bytes:
        """Serialize to the native record layout."""
        return _LAYOUT.pack(self.d_type, self.d_name)

    @classmethod
    def from_bytes(cls, data: bytes) -> RawDirent:
        """Parse a record produced by :meth:`to_bytes`."""
        if len(data) != RAW_DIRENT_SIZE:
            raise ValueError(f"expected {RAW_DIRENT_SIZE} bytes, got {len(data)}")
        d_type, d_name = _LAYOUT.unpack(data)
        return cls(d_type, d_name)


@dataclass(frozen=True)
class DirEntry:
    """A decoded directory entry."""

    file_type: FileType
    name: str

    @classmethod
    def from_dirent(cls, dirent: RawDirent) -> DirEntry | None:
        """Decode a raw record; ``None`` for unsupported types or empty names."""
        try:
            file_type = FileType(dirent.d_type)
        except ValueError:
            return None
        name = dirent.d_name.split(b"\0", 1)[0].decode("latin-1")
        if not name:
            return None
        return cls(file_type, name)