"""Connection and disk type classification."""
import re
from typing import Optional

from hddcheck.core.logger import get_logger
from hddcheck.core.runner import Smartctl
from hddcheck.discovery.parsers import label_field, prefixed_field
from hddcheck.models.disk import ConnectionType, DeviceClass, DiskType

logger = get_logger(__name__)

USB_BRIDGE_MARKER = "unknown usb bridge"
SOLID_STATE_MARKER = "Solid State Device"


class DeviceClassifier:
    """Work out how a device is attached and what kind of disk it is."""

    def __init__(self, smartctl: Optional[Smartctl] = None):
        self.smartctl = smartctl or Smartctl()

    def classify(self, path: str, info: Optional[str] = None,
                 bridge_override: Optional[bool] = None) -> DeviceClass:
        """Classify ``path``.

        Args:
            path: Device file, e.g. /dev/sda
            info: Identification output already fetched with the protocol
                hint applied; queried when omitted
            bridge_override: Known protocol hint; probed when omitted

        Returns:
            DeviceClass with the protocol hint to use for later queries
        """
        if bridge_override is None:
            bridge_override = self.needs_bridge_override(path)
        if info is None:
            info = self.smartctl.info(path, bridge_override)

        connection_type, label = self.detect_connection(path, info)
        disk_type = self.detect_disk_type(path, info)

        return DeviceClass(
            connection_type=connection_type,
            disk_type=disk_type,
            bridge_override=bridge_override,
            connection_label=label,
        )

    def needs_bridge_override(self, path: str) -> bool:
        """True when smartctl does not recognise the USB bridge chipset."""
        probe = self.smartctl.probe(path)
        if USB_BRIDGE_MARKER in probe.lower():
            logger.debug(f"{path}: unknown USB bridge, querying with -d sat")
            return True
        return False

    @staticmethod
    def detect_connection(path: str, info: str):
        """Return (ConnectionType, verbatim Interface label or None)."""
        interface = prefixed_field(info, "Interface:")
        if interface:
            return _connection_from_label(interface), interface

        lowered = info.lower()
        if "usb" in lowered:
            return ConnectionType.USB, None
        if "sata" in lowered:
            return ConnectionType.SATA, None
        if "nvme" in path:
            return ConnectionType.NVME, None
        return ConnectionType.UNKNOWN, None

    @staticmethod
    def detect_disk_type(path: str, info: str) -> DiskType:
        if "nvme" in path:
            return DiskType.NVME

        rotation = label_field(info, "Rotation Rate:")
        if not rotation:
            return DiskType.UNKNOWN
        if SOLID_STATE_MARKER in rotation:
            return DiskType.SSD
        if re.search(r"[0-9]+", rotation):
            return DiskType.HDD
        return DiskType.UNKNOWN


def _connection_from_label(label: str) -> ConnectionType:
    lowered = label.lower()
    if "usb" in lowered:
        return ConnectionType.USB
    if "nvme" in lowered:
        return ConnectionType.NVME
    if "sata" in lowered:
        return ConnectionType.SATA
    return ConnectionType.UNKNOWN
