"""External command execution for smartctl and parted queries."""
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from hddcheck.core.config import HddCheckConfig, get_config
from hddcheck.core.logger import get_logger

logger = get_logger(__name__)

# smartctl exit status is a bitmask. Bit 0 means the command line did not
# parse, bit 1 means the device could not be opened; the remaining bits
# describe disk state and come with usable output.
SMARTCTL_FAILURE_BITS = 0b11


class SmartctlNotFoundError(Exception):
    """Raised when the smartctl executable cannot be located."""
    pass


@dataclass
class CommandResult:
    """Captured outcome of one external command."""
    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stdout followed by stderr, like a shell `2>&1` capture."""
        if self.stderr:
            return f"{self.stdout}{self.stderr}"
        return self.stdout


class CommandRunner:
    """Run external commands without ever raising for a failed command.

    A missing binary, a timeout or an OS error is logged and returned as a
    failed CommandResult with empty output, so callers only ever deal with
    text that may be empty.
    """

    def __init__(self, timeout: Optional[int] = None):
        self.timeout = timeout

    def run(self, args: List[str]) -> CommandResult:
        logger.debug(f"Running: {' '.join(args)}")
        try:
            proc = subprocess.run(
                args, capture_output=True, text=True, timeout=self.timeout
            )
        except FileNotFoundError:
            logger.debug(f"{args[0]} not found")
            return CommandResult(args=args, returncode=-1)
        except subprocess.TimeoutExpired:
            logger.warning(f"Timed out after {self.timeout}s: {' '.join(args)}")
            return CommandResult(args=args, returncode=-1)
        except OSError as e:
            logger.warning(f"Failed to run {' '.join(args)}: {e}")
            return CommandResult(args=args, returncode=-1)

        return CommandResult(
            args=args,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )

    def exists(self, executable: str) -> bool:
        return shutil.which(executable) is not None


class Smartctl:
    """Thin wrapper issuing the smartctl queries used by the report."""

    def __init__(self, runner: Optional[CommandRunner] = None,
                 config: Optional[HddCheckConfig] = None):
        self.config = config or get_config()
        self.runner = runner or CommandRunner(timeout=self.config.command_timeout)

    def ensure_available(self) -> None:
        """Raise SmartctlNotFoundError unless smartctl can be executed."""
        if not self.runner.exists(self.config.smartctl):
            raise SmartctlNotFoundError(
                "smartctl not found. Please install smartmontools."
            )

    def scan(self, protocol: str) -> str:
        """Return `smartctl --scan -d <protocol>` output ("" on failure)."""
        result = self.runner.run([self.config.smartctl, "--scan", "-d", protocol])
        return self._usable_output(result)

    def probe(self, device: str) -> str:
        """Identification query with stderr merged, used to spot USB bridges.

        The bridge warning is printed on the failure path, so the exit
        status is deliberately ignored here.
        """
        result = self.runner.run([self.config.smartctl, "-i", device])
        return result.output

    def info(self, device: str, bridge_override: bool = False) -> str:
        return self._query("-i", device, bridge_override)

    def health(self, device: str, bridge_override: bool = False) -> str:
        return self._query("-H", device, bridge_override)

    def attributes(self, device: str, bridge_override: bool = False) -> str:
        return self._query("-A", device, bridge_override)

    def _query(self, flag: str, device: str, bridge_override: bool) -> str:
        args = [self.config.smartctl]
        if bridge_override:
            args.extend(["-d", "sat"])
        args.extend([flag, device])
        return self._usable_output(self.runner.run(args))

    def _usable_output(self, result: CommandResult) -> str:
        if result.returncode < 0 or result.returncode & SMARTCTL_FAILURE_BITS:
            logger.debug(
                f"{' '.join(result.args)} failed with status {result.returncode}"
            )
            return ""
        return result.stdout


class Parted:
    """Wrapper for `parted -s <device> print`."""

    def __init__(self, runner: Optional[CommandRunner] = None,
                 config: Optional[HddCheckConfig] = None):
        self.config = config or get_config()
        self.runner = runner or CommandRunner(timeout=self.config.command_timeout)

    def print_table(self, device: str) -> str:
        result = self.runner.run([self.config.parted, "-s", device, "print"])
        if not result.ok:
            logger.debug(f"parted failed for {device} with status {result.returncode}")
            return ""
        return result.stdout
