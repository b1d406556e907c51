"""Logging configuration for paping.

This module provides centralized logging configuration using Loguru.
It sets up logging to both file and console with proper formatting
and log rotation.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_DIR = Path.home() / ".paping" / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

LOG_FILE = LOG_DIR / "paping.log"

FILE_SINK_OPTIONS = {
    "rotation": "10 MB",
    "retention": "1 week",
    "compression": "zip",
    "format": (
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        "{name}:{function}:{line} - "
        "{message}"
    ),
    "level": "DEBUG",
    "backtrace": True,
    "diagnose": True,
}


def configure(console_level: str = "INFO") -> None:
    """Install the stderr sink at ``console_level`` and the rotating file sink."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=console_level,
        backtrace=True,
        diagnose=True,
    )
    logger.add(LOG_FILE, **FILE_SINK_OPTIONS)


def enable_debug() -> None:
    """Switch console output to DEBUG, keeping the file sink."""
    configure("DEBUG")


configure()

__all__ = ["configure", "enable_debug", "logger", "LOG_DIR", "LOG_FILE"]
