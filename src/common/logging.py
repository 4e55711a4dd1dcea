"""Logging configuration shared by the calculator CLIs."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "src",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a formatted stream handler to ``module_name`` once.

    With the default ``module_name`` this configures the parent of every
    ``src.*`` module logger, so the calculators' log lines and the CLI
    output share one handler. Repeated calls return the configured
    logger unchanged.

    Args:
        level: Logging level (default INFO).
        module_name: Name for the logger instance.
        stream: Output stream (default stdout).

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.setLevel(level)

    logger.setLevel(level)
    logger.addHandler(handler)
    return logger
