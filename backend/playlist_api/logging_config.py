"""
Logging configuration for the playlist server process.

``setup_logging`` attaches a console handler to the root logger the first
time it is called. Later calls leave existing handlers alone, so repeated
``create_app`` calls in tests do not duplicate output.
"""
from __future__ import annotations

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler."""

    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
