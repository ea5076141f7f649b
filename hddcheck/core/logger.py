"""Logging for hddcheck with stderr console and optional file output."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Log records go to stderr so they never interleave with the report table.
console = Console(stderr=True)

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: str, verbose: bool = False):
    """Mirror hddcheck log records into a file.

    Args:
        log_file: Path to log file
        verbose: Enable debug-level logging

    Note:
        Creates the parent directory if it doesn't exist.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file)
    target_log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("hddcheck")
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    _file_logging_configured = True

    root_logger.info(f"hddcheck logging initialized: {target_log_file}")


def set_verbose(verbose: bool) -> None:
    """Switch every hddcheck logger between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("hddcheck").setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("hddcheck.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
