"""Block device discovery through smartctl scans."""
from typing import List, Optional

from hddcheck.core.logger import get_logger
from hddcheck.core.runner import Smartctl
from hddcheck.discovery.parsers import first_token

logger = get_logger(__name__)

# SATA scan also reports USB-bridged SATA disks.
SCAN_PROTOCOLS = ("sat", "nvme")


class DeviceDiscovery:
    """Discover the device paths smartctl can address."""

    def __init__(self, smartctl: Optional[Smartctl] = None):
        self.smartctl = smartctl or Smartctl()

    def discover(self) -> List[str]:
        """Merge the SATA and NVMe scans into a sorted, deduplicated list."""
        devices = set()

        for protocol in SCAN_PROTOCOLS:
            output = self.smartctl.scan(protocol)
            found = self._parse_scan(output)
            logger.debug(f"smartctl --scan -d {protocol}: {len(found)} device(s)")
            devices.update(found)

        return sorted(devices)

    def _parse_scan(self, output: str) -> List[str]:
        paths = []
        for line in output.splitlines():
            token = first_token(line)
            if not token or token.startswith('#'):
                continue
            paths.append(token)
        return paths
