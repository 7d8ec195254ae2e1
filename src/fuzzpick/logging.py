"""Logging configuration using loguru."""

from __future__ import annotations

import sys

from loguru import logger


def setup_logging(*, verbose: bool = False) -> None:
    """Configure loguru for CLI output.

    - Remove default handler
    - Add stderr handler so matches on stdout stay pipeable
    - Default level: WARNING
    - Verbose mode: DEBUG (show scoring details)
    """
    logger.remove()
    level = "DEBUG" if verbose else "WARNING"
    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level}</level> | {message}",
        colorize=True,
    )
