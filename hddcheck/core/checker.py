"""Sequential health check pipeline: discover, classify, extract, inspect."""
from typing import Iterator, List, Optional

from hddcheck.core.config import HddCheckConfig, get_config
from hddcheck.core.logger import get_logger
from hddcheck.core.runner import CommandRunner, Parted, Smartctl
from hddcheck.discovery.classifier import DeviceClassifier
from hddcheck.discovery.extractor import AttributeExtractor
from hddcheck.discovery.partitions import PartitionInspector
from hddcheck.discovery.scanner import DeviceDiscovery
from hddcheck.models.disk import DeviceReport

logger = get_logger(__name__)


class HealthCheck:
    """Drive the per-device pipeline one device at a time.

    Devices are processed strictly in discovery order. Nothing is shared
    between devices, so an interrupt between two devices leaves every
    report already yielded valid.
    """

    def __init__(self, config: Optional[HddCheckConfig] = None,
                 runner: Optional[CommandRunner] = None):
        self.config = config or get_config()
        runner = runner or CommandRunner(timeout=self.config.command_timeout)

        self.smartctl = Smartctl(runner=runner, config=self.config)
        self.discovery = DeviceDiscovery(self.smartctl)
        self.classifier = DeviceClassifier(self.smartctl)
        self.extractor = AttributeExtractor(self.smartctl, config=self.config)
        self.partitions = PartitionInspector(Parted(runner=runner, config=self.config))

    def ensure_ready(self) -> None:
        """Raise SmartctlNotFoundError when smartctl is missing."""
        self.smartctl.ensure_available()

    def discover(self) -> List[str]:
        devices = self.discovery.discover()
        logger.debug(f"Discovered {len(devices)} device(s): {', '.join(devices)}")
        return devices

    def check_device(self, path: str) -> DeviceReport:
        """Build the full report for one device."""
        bridge_override = self.classifier.needs_bridge_override(path)
        info = self.smartctl.info(path, bridge_override)
        device_class = self.classifier.classify(
            path, info=info, bridge_override=bridge_override
        )
        report = self.extractor.extract(path, device_class, info=info)
        report.bootable = self.partitions.has_bootable_partition(path)
        logger.debug(
            f"{path}: {report.connection} {report.disk_type.value} "
            f"{report.model} -> {report.advisory.value}"
        )
        return report

    def run(self, devices: Optional[List[str]] = None) -> Iterator[DeviceReport]:
        """Yield one report per device, discovering devices when not given."""
        if devices is None:
            devices = self.discover()
        for path in devices:
            yield self.check_device(path)
