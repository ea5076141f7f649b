"""Data models for hddcheck."""
from hddcheck.models.disk import (
    NOT_AVAILABLE,
    Advisory,
    ConnectionType,
    DeviceClass,
    DeviceReport,
    DiskType,
    WorkTime,
    format_work_time,
)

__all__ = [
    'NOT_AVAILABLE',
    'Advisory',
    'ConnectionType',
    'DeviceClass',
    'DeviceReport',
    'DiskType',
    'WorkTime',
    'format_work_time',
]
