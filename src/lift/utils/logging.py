"""Logging utilities."""

import logging
import sys


def setup_logging(level: str = "WARNING", quiet: bool = False):
    """Setup logging configuration."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    if quiet:
        log_level = max(log_level, logging.ERROR)

    # stdout carries rendered documents, keep log records off it
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    logging.getLogger("lift").setLevel(log_level)
