"""Loguru logger configured once and imported across the project."""

import sys

from loguru import logger

from refmatch.config import settings


def setup_logger() -> None:
    logger.remove()  # drop the default stderr handler

    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if settings.LOG_FILE:
        # Serialized JSON lines for structured analysis
        logger.add(
            settings.LOG_FILE,
            level="DEBUG",
            rotation="10 MB",
            retention="14 days",
            serialize=True,
        )


__all__ = ["logger", "setup_logger"]
