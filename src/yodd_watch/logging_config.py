"""Logging setup via loguru.

Library modules only emit records through ``loguru.logger``; applications
embedding the library call :func:`configure_logging` once at startup.
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure console logging and, optionally, a JSON log file.

    Args:
        log_level: Minimum level for the console handler.
        log_file: Path of a rotating JSON log file, or None to skip it.
        rotation_size: File size that triggers rotation (e.g. "10 MB").
        retention_count: Number of rotated files to keep.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            enqueue=True,
        )

    logger.debug("Logging configured (level={})", log_level)
