"""
Utility functions for the signup end-to-end tests.
"""
import logging
import sys
from pathlib import Path
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to log levels."""
    COLORS = {
        "DEBUG": "\033[94m",      # Blue
        "INFO": "\033[92m",       # Green
        "WARNING": "\033[93m",    # Yellow
        "ERROR": "\033[91m",      # Red
        "CRITICAL": "\033[91m",   # Red
        "RESET": "\033[0m",
    }

    def format(self, record):
        log_message = super().format(record)
        if getattr(record, "no_color", False):
            return log_message
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        return f"{color}{log_message}{self.COLORS['RESET']}"


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Set up logging configuration with colored console output.

    Args:
        verbose: If True, set log level to DEBUG
        log_file: Optional path to a log file (written without colors)
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(ColoredFormatter(LOG_FORMAT))
    handlers = [stream_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)


def mask_value(value: str, visible: int = 0) -> str:
    """
    Mask a sensitive value for log output.

    The masked string has a fixed length so it does not leak the length
    of the original value.

    Args:
        value: The value to mask
        visible: Number of leading characters to keep readable

    Returns:
        Masked representation, e.g. "********" or "ab******"
    """
    if not value:
        return ""
    prefix = value[:visible] if visible > 0 else ""
    return f"{prefix}{'*' * 8}"


def ensure_directory(path: str) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Path to the directory

    Returns:
        Path object for the directory
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path
