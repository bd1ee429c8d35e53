"""
Logging setup

The package disables its loguru records on import so library users are not
flooded with debug output. setup_logging() turns them back on and installs
the stderr format used by the tooling.
"""

import sys

from loguru import logger


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    logger.enable("osm_request")
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )
