"""Canned smartctl and parted output plus a fake command runner."""
from typing import Dict, List, Optional, Tuple

from hddcheck.core.runner import CommandResult, CommandRunner


class FakeRunner(CommandRunner):
    """CommandRunner answering from a table of canned outputs.

    Keys are the command argument tuples; unknown commands fail like a
    missing binary.
    """

    def __init__(self, outputs: Optional[Dict[Tuple[str, ...], object]] = None,
                 available: Tuple[str, ...] = ("smartctl", "parted")):
        super().__init__(timeout=None)
        self.outputs = dict(outputs or {})
        self.available = available
        self.calls: List[Tuple[str, ...]] = []

    def run(self, args):
        key = tuple(args)
        self.calls.append(key)
        answer = self.outputs.get(key)
        if answer is None:
            return CommandResult(args=list(args), returncode=-1)
        if isinstance(answer, CommandResult):
            return answer
        if isinstance(answer, BaseException):
            raise answer
        return CommandResult(args=list(args), returncode=0, stdout=answer)

    def exists(self, executable):
        return executable in self.available


SATA_INFO = """smartctl 7.3 2022-02-28 r5338 [x86_64-linux-6.1.0] (local build)
Copyright (C) 2002-22, Bruce Allen, Christian Franke, www.smartmontools.org

=== START OF INFORMATION SECTION ===
Model Family:     Western Digital Red
Device Model:     WDC WD40EFRX-68N32N0
Serial Number:    WD-WCC7K1234567
LU WWN Device Id: 5 0014ee 2b8a1c2d3
Firmware Version: 82.00A82
User Capacity:    4,000,787,030,016 bytes [4.00 TB]
Sector Sizes:     512 bytes logical, 4096 bytes physical
Rotation Rate:    5400 rpm
Form Factor:      3.5 inches
Device is:        In smartctl database 7.3/5319
ATA Version is:   ACS-3 T13/2161-D revision 5
SATA Version is:  SATA 3.1, 6.0 Gb/s (current: 6.0 Gb/s)
SMART support is: Available - device has SMART capability.
SMART support is: Enabled
"""

SSD_INFO = """=== START OF INFORMATION SECTION ===
Model Family:     Samsung based SSDs
Device Model:     Samsung SSD 860 EVO 500GB
Serial Number:    S3Z1NB0K123456A
LU WWN Device Id: 5 002538 e40a1b2c3
User Capacity:    500,107,862,016 bytes [500 GB]
Rotation Rate:    Solid State Device
SATA Version is:  SATA 3.2, 6.0 Gb/s (current: 6.0 Gb/s)
"""

NVME_INFO = """=== START OF INFORMATION SECTION ===
Model Number:                       Samsung SSD 970 EVO Plus 1TB
Serial Number:                      S4EWNX0R123456
Firmware Version:                   2B2QEXM7
PCI Vendor/Subsystem ID:            0x144d
Total NVM Capacity:                 1,000,204,886,016 [1.00 TB]
Namespace 1 Size/Capacity:          1,000,204,886,016 [1.00 TB]
"""

USB_BRIDGE_PROBE = """smartctl 7.3 2022-02-28 r5338 [x86_64-linux-6.1.0] (local build)
Copyright (C) 2002-22, Bruce Allen, Christian Franke, www.smartmontools.org

/dev/sdc: Unknown USB bridge [0x152d:0x0578 (0x214)]
Please specify device type with the -d option.
"""

HEALTH_PASSED = """=== START OF READ SMART DATA SECTION ===
SMART overall-health self-assessment test result: PASSED
"""

ATTRIBUTES_HEALTHY = """=== START OF READ SMART DATA SECTION ===
SMART Attributes Data Structure revision number: 16
Vendor Specific SMART Attributes with Thresholds:
ID# ATTRIBUTE_NAME          FLAG     VALUE WORST THRESH TYPE      UPDATED  WHEN_FAILED RAW_VALUE
  1 Raw_Read_Error_Rate     0x002f   200   200   051    Pre-fail  Always       -       0
  3 Spin_Up_Time            0x0027   186   178   021    Pre-fail  Always       -       7683
  4 Start_Stop_Count        0x0032   100   100   000    Old_age   Always       -       412
  5 Reallocated_Sector_Ct   0x0033   200   200   140    Pre-fail  Always       -       0
  9 Power_On_Hours          0x0032   045   045   000    Old_age   Always       -       40321
 10 Spin_Retry_Count        0x0032   100   100   000    Old_age   Always       -       0
193 Load_Cycle_Count        0x0032   200   200   000    Old_age   Always       -       1289
194 Temperature_Celsius     0x0022   116   103   000    Old_age   Always       -       34 (Min/Max 18/47)
197 Current_Pending_Sector  0x0032   200   200   000    Old_age   Always       -       0
198 Offline_Uncorrectable   0x0030   100   253   000    Old_age   Offline      -       0
"""

NVME_ATTRIBUTES = """=== START OF SMART DATA SECTION ===
SMART/Health Information (NVMe Log 0x02)
Critical Warning:                   0x00
Temperature:                        41 Celsius
Available Spare:                    100%
Percentage Used:                    2%
Power Cycles:                       1,024
Power On Hours:                     12,345
Unsafe Shutdowns:                   57
Media and Data Integrity Errors:    0
"""

PARTED_BOOT = """Model: ATA WDC WD40EFRX-68N (scsi)
Disk /dev/sda: 4001GB
Sector size (logical/physical): 512B/4096B
Partition Table: gpt
Disk Flags:

Number  Start   End     Size    File system  Name  Flags
 1      1049kB  538MB   537MB   fat32              boot, esp
 2      538MB   4001GB  4000GB  ext4

"""

PARTED_PLAIN = """Model: ATA WDC WD40EFRX-68N (scsi)
Disk /dev/sdb: 4001GB
Partition Table: gpt

Number  Start   End     Size    File system  Name  Flags
 1      1049kB  4001GB  4001GB  ext4

"""


def smartctl_outputs(path, info, health=HEALTH_PASSED, attributes=ATTRIBUTES_HEALTHY,
                     probe=None, bridge=False, parted=""):
    """Canned command table for one device."""
    hint = ("-d", "sat") if bridge else ()
    return {
        ("smartctl", "-i", path): probe if probe is not None else info,
        ("smartctl",) + hint + ("-i", path): info,
        ("smartctl",) + hint + ("-H", path): health,
        ("smartctl",) + hint + ("-A", path): attributes,
        ("parted", "-s", path, "print"): parted,
    }


SCAN_OUTPUTS = {
    ("smartctl", "--scan", "-d", "sat"): (
        "/dev/sda -d sat # /dev/sda [SAT], ATA device\n"
        "/dev/sdb -d sat # /dev/sdb [SAT], ATA device\n"
    ),
    ("smartctl", "--scan", "-d", "nvme"): "/dev/nvme0 -d nvme # /dev/nvme0, NVMe device\n",
}


def sample_host():
    """Two SATA disks and one NVMe drive, as reported by smartctl scans."""
    outputs = dict(SCAN_OUTPUTS)
    outputs.update(smartctl_outputs("/dev/sda", SATA_INFO, parted=PARTED_BOOT))
    outputs.update(smartctl_outputs("/dev/sdb", SSD_INFO, parted=PARTED_PLAIN))
    outputs.update(smartctl_outputs("/dev/nvme0", NVME_INFO, attributes=NVME_ATTRIBUTES))
    return outputs
