"""Physical disk report models."""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

NOT_AVAILABLE = "N/A"

_DIGITS = re.compile(r"[0-9]+")


class ConnectionType(Enum):
    """How the disk is attached to the host."""
    SATA = "SATA"
    USB = "USB"
    NVME = "NVMe"
    UNKNOWN = NOT_AVAILABLE


class DiskType(Enum):
    """Disk technology type."""
    HDD = "HDD"
    SSD = "SSD"
    NVME = "NVME"
    UNKNOWN = NOT_AVAILABLE


class Advisory(Enum):
    """Binary health summary derived from the error counters."""
    OK = "OK"
    FAIL = "FAIL"


@dataclass(frozen=True)
class WorkTime:
    """Cumulative powered-on time split into days and hours."""
    days: int
    hours: int

    @classmethod
    def from_hours(cls, power_on_hours: int) -> "WorkTime":
        return cls(days=power_on_hours // 24, hours=power_on_hours % 24)

    def __str__(self) -> str:
        return f"{self.days}d {self.hours}h"


def format_work_time(power_on_hours) -> str:
    """Render power-on hours as "<days>d <hours>h", or N/A.

    Accepts an int or the raw text captured from the attribute table; only
    a non-negative integer (or a string of digits) is converted.
    """
    if isinstance(power_on_hours, bool):
        return NOT_AVAILABLE
    if isinstance(power_on_hours, str):
        if not _DIGITS.fullmatch(power_on_hours):
            return NOT_AVAILABLE
        power_on_hours = int(power_on_hours)
    if not isinstance(power_on_hours, int) or power_on_hours < 0:
        return NOT_AVAILABLE
    return str(WorkTime.from_hours(power_on_hours))


@dataclass(frozen=True)
class DeviceClass:
    """Result of classifying one device path."""
    connection_type: ConnectionType
    disk_type: DiskType
    bridge_override: bool = False
    connection_label: Optional[str] = None  # verbatim Interface: value

    @property
    def connection(self) -> str:
        return self.connection_label or self.connection_type.value


@dataclass
class DeviceReport:
    """Everything reported about one device during a single run."""
    path: str
    connection_type: ConnectionType = ConnectionType.UNKNOWN
    disk_type: DiskType = DiskType.UNKNOWN
    connection_label: Optional[str] = None
    model: str = NOT_AVAILABLE
    serial: str = NOT_AVAILABLE
    capacity: str = NOT_AVAILABLE
    wwn: str = NOT_AVAILABLE
    health: str = "Unknown"
    reallocated_sectors: int = 0
    pending_sectors: int = 0
    uncorrectable_sectors: int = 0
    spin_retries: int = 0
    head_parking_count: Optional[int] = None
    power_on_hours: Optional[int] = None
    temperature_c: Optional[int] = None
    bootable: bool = False

    @property
    def connection(self) -> str:
        return self.connection_label or self.connection_type.value

    @property
    def error_counters(self) -> tuple:
        return (
            self.reallocated_sectors,
            self.pending_sectors,
            self.uncorrectable_sectors,
            self.spin_retries,
        )

    @property
    def advisory(self) -> Advisory:
        """FAIL when any error counter is non-zero.

        Health status and temperature are not considered.
        """
        if any(count > 0 for count in self.error_counters):
            return Advisory.FAIL
        return Advisory.OK

    @property
    def work_time(self) -> Optional[WorkTime]:
        hours = self.power_on_hours
        if isinstance(hours, bool) or not isinstance(hours, int) or hours < 0:
            return None
        return WorkTime.from_hours(hours)

    @property
    def work_time_display(self) -> str:
        work_time = self.work_time
        return str(work_time) if work_time is not None else NOT_AVAILABLE
