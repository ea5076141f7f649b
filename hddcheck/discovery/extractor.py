"""SMART field extraction from smartctl identification, health and attribute output."""
from typing import Optional

from hddcheck.core.config import HddCheckConfig, get_config
from hddcheck.core.logger import get_logger
from hddcheck.core.runner import Smartctl
from hddcheck.discovery.parsers import (
    attribute_column,
    bracket_field,
    label_field,
    parse_count,
)
from hddcheck.models.disk import NOT_AVAILABLE, Advisory, DeviceClass, DeviceReport

logger = get_logger(__name__)

HEALTH_LABEL = "SMART overall-health self-assessment test result"


def _first(*values: Optional[str], default: str = NOT_AVAILABLE) -> str:
    for value in values:
        if value:
            return value
    return default


class AttributeExtractor:
    """Build a DeviceReport from the three per-device smartctl queries."""

    def __init__(self, smartctl: Optional[Smartctl] = None,
                 config: Optional[HddCheckConfig] = None):
        self.config = config or get_config()
        self.smartctl = smartctl or Smartctl(config=self.config)

    def extract(self, path: str, device_class: DeviceClass,
                info: Optional[str] = None) -> DeviceReport:
        """Query ``path`` and extract every report field.

        Args:
            path: Device file
            device_class: Classification, including the protocol hint
            info: Identification output if it was already fetched

        Returns:
            DeviceReport with defaults for anything the queries did not supply
        """
        override = device_class.bridge_override
        if info is None:
            info = self.smartctl.info(path, override)
        health = self.smartctl.health(path, override)
        attributes = self.smartctl.attributes(path, override)

        report = DeviceReport(
            path=path,
            connection_type=device_class.connection_type,
            connection_label=device_class.connection_label,
            disk_type=device_class.disk_type,
        )
        self.apply_identity(report, info)
        report.health = self.parse_health(health)
        self.apply_attributes(report, attributes)
        return report

    def apply_identity(self, report: DeviceReport, info: str) -> None:
        report.model = _first(
            label_field(info, "Device Model"),
            label_field(info, "Model Family"),
        )
        report.serial = _first(label_field(info, "Serial Number"))
        report.capacity = _first(
            bracket_field(info, "User Capacity:"),
            bracket_field(info, "Total NVM Capacity:"),
        )
        report.wwn = _first(
            label_field(info, "LU WWN Device Id:"),
            label_field(info, "WWN:"),
        )

    @staticmethod
    def parse_health(health: str) -> str:
        return _first(label_field(health, HEALTH_LABEL), default="Unknown")

    def apply_attributes(self, report: DeviceReport, attributes: str) -> None:
        names = self.config.attributes

        report.reallocated_sectors = self._counter(attributes, names.reallocated)
        report.pending_sectors = self._counter(attributes, names.pending)
        report.uncorrectable_sectors = self._counter(attributes, names.uncorrectable)
        report.spin_retries = self._counter(attributes, names.spin_retry)

        report.head_parking_count = self._raw(attributes, names.load_cycle)

        report.temperature_c = self._raw(attributes, names.temperature)
        report.power_on_hours = self._raw(attributes, names.power_on_hours)

        if report.advisory is Advisory.FAIL:
            logger.debug(
                f"{report.path}: non-zero error counters {report.error_counters}"
            )

    def _raw_token(self, attributes: str, name: str) -> Optional[str]:
        return attribute_column(attributes, name, self.config.raw_value_column)

    def _raw(self, attributes: str, name: str) -> Optional[int]:
        return parse_count(self._raw_token(attributes, name))

    def _counter(self, attributes: str, name: str) -> int:
        value = self._raw(attributes, name)
        return value if value is not None else 0
