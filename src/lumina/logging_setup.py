"""Root logger configuration for the command-line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(funcName)s] - %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Send log records at *level* and above to stderr."""
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
