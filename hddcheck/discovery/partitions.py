"""Boot flag detection from parted partition tables."""
from typing import Optional

from hddcheck.core.runner import Parted
from hddcheck.discovery.parsers import is_partition_line


class PartitionInspector:
    """Inspect a device's partition table via `parted -s <dev> print`."""

    def __init__(self, parted: Optional[Parted] = None):
        self.parted = parted or Parted()

    def has_bootable_partition(self, path: str) -> bool:
        return self.is_bootable(self.parted.print_table(path))

    @staticmethod
    def is_bootable(table: str) -> bool:
        """True when any partition line carries a boot flag."""
        for line in table.splitlines():
            if is_partition_line(line) and "boot" in line.lower():
                return True
        return False
