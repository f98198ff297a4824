"""Utils module."""

import sys

from loguru import logger

from slc.utils.profiler import Profiler


def configure_logging(*, verbose: bool = False) -> None:
    """Send logs to standard error only, at DEBUG when verbose and WARNING otherwise."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


__all__ = [
    "Profiler",
    "configure_logging",
]
