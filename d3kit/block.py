"""Block devices, MBR partition tables and partitions."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = [
    "BlockDevice",
    "RamDisk",
    "Partition",
    "PartitionEntry",
    "lba_to_chs",
    "parse_mbr",
    "scan_partitions",
]

MBR_SIZE = 512
_TABLE_OFFSET = 446
_ENTRY_SIZE = 16
_ENTRY_COUNT = 4
_SIGNATURE = b"\x55\xaa"


class BlockDevice(ABC):
    """A device read and written in fixed-size sectors addressed by LBA."""

    @abstractmethod
    def read(self, sector: int, count: int) -> bytes:
        """Read up to ``count`` sectors starting at ``sector``."""

    @abstractmethod
    def write(self, sector: int, data: bytes) -> int:
        """Write whole sectors from ``data``; return the number written."""

    @property
    @abstractmethod
    def sector_count(self) -> int:
        """Number of sectors on the device."""

    @property
    @abstractmethod
    def sector_size(self) -> int:
        """Size of one sector in bytes."""


def lba_to_chs(lba: int, heads: int, sectors_per_cylinder: int) -> tuple[int, int, int]:
    """Convert a logical block address to (cylinder, head, sector)."""
    per_cylinder = heads * sectors_per_cylinder
    cylinder = (lba // per_cylinder) & 0xFFFF
    head = (lba % per_cylinder) & 0xFF
    sector = (lba % sectors_per_cylinder) & 0xFF
    return cylinder, head, sector


class RamDisk(BlockDevice):
    """A block device backed by memory."""

    def __init__(self, sector_count: int, sector_size: int = 512) -> None:
        if sector_count < 0 or sector_size <= 0:
            raise ValueError("sector count must be >= 0 and sector size > 0")
        self._sector_count = sector_count
        self._sector_size = sector_size
        self._data = bytearray(sector_count * sector_size)

    @property
    def sector_count(self) -> int:
        return self._sector_count

    @property
    def sector_size(self) -> int:
        return self._sector_size

    def read(self, sector: int, count: int) -> bytes:
        if sector < 0 or sector >= self._sector_count or count <= 0:
            return b""
        count = min(count, self._sector_count - sector)
        start = sector * self._sector_size
        return bytes(self._data[start:start + count * self._sector_size])

    def write(self, sector: int, data: bytes) -> int:
        if len(data) % self._sector_size:
            raise ValueError(f"data length must be a multiple of {self._sector_size}")
        if sector < 0 or sector >= self._sector_count:
            return 0
        count = min(len(data) // self._sector_size, self._sector_count - sector)
        start = sector * self._sector_size
        length = count * self._sector_size
        self._data[start:start + length] = data[:length]
        return count


class Partition(BlockDevice):
    """A window onto a range of sectors of another device."""

    def __init__(self, device: BlockDevice, start_sector: int, sector_count: int) -> None:
        self._device = device
        self._start_sector = start_sector
        self._sector_count = sector_count

    @property
    def device(self) -> BlockDevice:
        return self._device

    @property
    def start_sector(self) -> int:
        return self._start_sector

    @property
    def sector_count(self) -> int:
        return self._sector_count

    @property
    def sector_size(self) -> int:
        return self._device.sector_size

    def read(self, sector: int, count: int) -> bytes:
        if sector < 0 or sector >= self._sector_count:
            return b""
        count = min(count, self._sector_count - sector)
        return self._device.read(sector + self._start_sector, count)

    def write(self, sector: int, data: bytes) -> int:
        if sector < 0 or sector >= self._sector_count:
            return 0
        count = min(len(data) // self.sector_size, self._sector_count - sector)
        return self._device.write(
            sector + self._start_sector, data[:count * self.sector_size]
        )


@dataclass(frozen=True)
class PartitionEntry:
    """One used slot of an MBR partition table."""

    status: int
    partition_type: int
    start_sector_lba: int
    sector_count_lba: int


def parse_mbr(data: bytes) -> tuple[PartitionEntry | None, ...]:
    """Parse the four partition slots of a master boot record; empty slots are ``None``."""
    if len(data) < MBR_SIZE:
        raise ValueError(f"an MBR needs {MBR_SIZE} bytes, got {len(data)}")
    if bytes(data[510:512]) != _SIGNATURE:
        raise ValueError("missing MBR boot signature")

    entries: list[PartitionEntry | None] = []
    for slot in range(_ENTRY_COUNT):
        offset = _TABLE_OFFSET + slot * _ENTRY_SIZE
        status = data[offset]
        partition_type = data[offset + 4]
        start, count = struct.unpack_from("<II", data, offset + 8)
        if partition_type == 0:
            entries.append(None)
        else:
            entries.append(PartitionEntry(status, partition_type, start, count))
    return tuple(entries)


def scan_partitions(device: BlockDevice) -> list[Partition]:
    """Return the partitions listed in the device's MBR; none if it has no valid MBR."""
    try:
        entries = parse_mbr(device.read(0, 1))
    except ValueError:
        return []
    return [
        Partition(device, entry.start_sector_lba, entry.sector_count_lba)
        for entry in entries
        if entry is not None
    ]