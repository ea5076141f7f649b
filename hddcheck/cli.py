#!/usr/bin/env python3
"""hddcheck CLI - SMART health summary for every disk smartctl can see."""
from typing import Optional

import typer
from rich.console import Console

from hddcheck.cli_support import (
    handle_cli_error,
    print_info,
    print_lines,
    print_warning,
    setup_logging,
)
from hddcheck.core.checker import HealthCheck
from hddcheck.core.config import get_config
from hddcheck.core.logger import get_logger
from hddcheck.core.runner import SmartctlNotFoundError
from hddcheck.report.renderer import ReportRenderer

app = typer.Typer(
    name="check-hdds",
    help="""Check all detected disks and show key SMART parameters.

Scans SATA (including USB bridges) and NVMe devices with smartctl, then
prints one fixed-width row per disk with an OK/FAIL advisory.

Requires smartmontools (smartctl) and parted; run as root.
""",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


@app.command()
def check(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Scan disks and print the SMART summary table."""
    setup_logging(log_file=log_file, verbose=verbose)

    config = get_config()
    checker = HealthCheck(config=config)

    try:
        checker.ensure_ready()
    except SmartctlNotFoundError as e:
        handle_cli_error(e, console, exit_code=1)

    print_info(console, "Scanning for disks...")
    devices = checker.discover()
    if not devices:
        print_lines(console, ["No disks found by smartctl."])
        raise typer.Exit(0)

    renderer = ReportRenderer(config.columns)
    print_lines(console, renderer.render_header())

    reports = checker.run(devices)
    try:
        for report in reports:
            print_lines(console, [renderer.render(report)])
    except KeyboardInterrupt:
        print_warning(console, "Interrupted, remaining disks skipped.")
        raise typer.Exit(130)

    print_lines(console, ["HDD check complete."])
    console.print()
    print_lines(console, renderer.render_legend())


if __name__ == "__main__":
    app()
