"""hddcheck runtime configuration and settings."""
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Column:
    """One fixed-width column of the report table."""
    name: str
    width: int
    description: str
    truncate: bool = True


# Column layout of the report table. Widths are relied upon by tools that
# screen-scrape the output, so they must not change.
DEFAULT_COLUMNS: Tuple[Column, ...] = (
    Column("Disk", 10, "Device file for the disk (e.g., /dev/sda)", truncate=False),
    Column("Boot", 6, "Bootable indicator ('*' if any partition is bootable)"),
    Column("Conn", 10, "Connection type (e.g., USB, SATA, NVMe)"),
    Column("Type", 8, "Disk type (HDD, SSD, NVME)"),
    Column("Model", 22, "The disk model name"),
    Column("Serial", 20, "The disk serial number"),
    Column("Size", 10, "Disk capacity (e.g., '1.00 TB')"),
    Column("WWN", 20, "The disk's WWN as reported by smartctl (e.g., '5 000cca 264d0e0b2')"),
    Column("Health", 8, "Overall SMART health status (e.g., PASSED)"),
    Column("R", 4, "Reallocated Sector Count"),
    Column("P", 4, "Current Pending Sector Count"),
    Column("U", 4, "Offline Uncorrectable Sector Count"),
    Column("S", 4, "Spin Retry Count"),
    Column("HP", 8, "Head Parking Count (Load_Cycle_Count)"),
    Column("Work", 12, "Work time from Power_On_Hours (days and hours)"),
    Column("Temp", 6, "Temperature in Celsius (from Temperature_Celsius attribute)"),
    Column("Advice", 8, "'FAIL' if any key parameter is non-zero, otherwise 'OK'"),
)


@dataclass(frozen=True)
class AttributeNames:
    """Names of the SMART attribute table rows that feed the report."""
    reallocated: str = "Reallocated_Sector_Ct"
    pending: str = "Current_Pending_Sector"
    uncorrectable: str = "Offline_Uncorrectable"
    spin_retry: str = "Spin_Retry_Count"
    load_cycle: str = "Load_Cycle_Count"
    power_on_hours: str = "Power_On_Hours"
    temperature: str = "Temperature_Celsius"


@dataclass
class HddCheckConfig:
    """Runtime configuration for a health check run.

    Attributes:
        smartctl: smartctl executable name or path (default: smartctl)
        parted: parted executable name or path (default: parted)
        command_timeout: Timeout in seconds for each external command (default: 30)
        raw_value_column: 1-based column of the attribute table holding RAW_VALUE
        attributes: SMART attribute names read from the attribute table
        columns: Column layout of the rendered table
    """

    smartctl: str = "smartctl"
    parted: str = "parted"
    command_timeout: int = 30  # per smartctl/parted call
    raw_value_column: int = 10
    attributes: AttributeNames = field(default_factory=AttributeNames)
    columns: List[Column] = field(default_factory=lambda: list(DEFAULT_COLUMNS))

    @classmethod
    def from_env(cls) -> "HddCheckConfig":
        """Create config from environment variables.

        Environment variables:
            HDDCHECK_SMARTCTL: smartctl executable
            HDDCHECK_PARTED: parted executable
            HDDCHECK_COMMAND_TIMEOUT: Per-command timeout in seconds

        Returns:
            HddCheckConfig instance with values from environment or defaults
        """
        return cls(
            smartctl=os.getenv("HDDCHECK_SMARTCTL", cls.smartctl),
            parted=os.getenv("HDDCHECK_PARTED", cls.parted),
            command_timeout=int(
                os.getenv("HDDCHECK_COMMAND_TIMEOUT", cls.command_timeout)
            ),
        )


# Global config instance (can be overridden)
_config: Optional[HddCheckConfig] = None


def get_config() -> HddCheckConfig:
    """Get the global hddcheck configuration.

    Returns:
        HddCheckConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = HddCheckConfig.from_env()
    return _config


def set_config(config: Optional[HddCheckConfig]) -> None:
    """Override the global configuration (None resets to environment)."""
    global _config
    _config = config
