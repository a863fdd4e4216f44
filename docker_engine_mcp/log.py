"""Centralized logging setup"""

import logging
import sys

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured
    if _configured:
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='[%(name)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with consistent formatting"""
    return logging.getLogger(name)
