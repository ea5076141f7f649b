"""hddcheck - SMART health summary table for SATA, USB and NVMe disks."""

__version__ = "0.1.0"
