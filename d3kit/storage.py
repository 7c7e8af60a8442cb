"""A registry of named block devices and their partitions."""

from __future__ import annotations

import logging
import threading

from d3kit.block import BlockDevice, scan_partitions

__all__ = ["StorageRegistry"]

_log = logging.getLogger(__name__)


class StorageRegistry:
    """Names block devices by type and index and registers their partitions."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._type_counts: dict[str, int] = {}
        self._devices: dict[str, BlockDevice] = {}

    def add_block_device(self, typ: str, drive: BlockDevice) -> str:
        """Register ``drive`` as ``<typ><n>`` and its partitions as ``<typ><n>p<i>``.

        Returns the name given to the drive.
        """
        with self._lock:
            index = self._type_counts.get(typ, 0)
            self._type_counts[typ] = index + 1
        name = f"{typ}{index}"

        partitions = scan_partitions(drive)

        with self._lock:
            self._devices[name] = drive
            _log.info("Registered block device [%s]", name)
            for number, partition in enumerate(partitions):
                partition_name = f"{name}p{number}"
                self._devices[partition_name] = partition
                _log.info("Registered partition [%s]", partition_name)
        return name

    def block_device(self, name: str) -> BlockDevice | None:
        """Return the device registered under ``name``, if any."""
        with self._lock:
            return self._devices.get(name)