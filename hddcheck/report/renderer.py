"""Fixed-width table rendering for device reports."""
from typing import List, Optional, Sequence

from hddcheck.core.config import Column, get_config
from hddcheck.models.disk import NOT_AVAILABLE, DeviceReport


def _display(value: Optional[int]) -> str:
    return NOT_AVAILABLE if value is None else str(value)


class ReportRenderer:
    """Render the header, device rows and legend of the report table."""

    def __init__(self, columns: Optional[Sequence[Column]] = None):
        self.columns: List[Column] = list(columns or get_config().columns)

    def render_header(self) -> List[str]:
        """Header row plus a dashed separator of the same width."""
        header = self._format([column.name for column in self.columns])
        return [header, "-" * len(header)]

    def render(self, report: DeviceReport) -> str:
        return self._format(self.row_values(report))

    def render_legend(self) -> List[str]:
        label_width = max(len(column.name) for column in self.columns)
        lines = ["Column Explanations:"]
        for column in self.columns:
            lines.append(f"{column.name:<{label_width + 1}}: {column.description}")
        return lines

    @staticmethod
    def row_values(report: DeviceReport) -> List[str]:
        """Cell values in column order, before padding."""
        return [
            report.path,
            "*" if report.bootable else "",
            report.connection,
            report.disk_type.value,
            report.model,
            report.serial,
            report.capacity,
            report.wwn,
            report.health,
            str(report.reallocated_sectors),
            str(report.pending_sectors),
            str(report.uncorrectable_sectors),
            str(report.spin_retries),
            _display(report.head_parking_count),
            report.work_time_display,
            _display(report.temperature_c),
            report.advisory.value,
        ]

    def _format(self, values: Sequence[str]) -> str:
        if len(values) != len(self.columns):
            raise ValueError(
                f"Expected {len(self.columns)} values, got {len(values)}"
            )
        cells = []
        for column, value in zip(self.columns, values):
            if column.truncate:
                value = value[:column.width]
            cells.append(value.ljust(column.width))
        return " ".join(cells)
