"""
Logging Configuration

All package modules log under the "src" logger. The CLI attaches one
handler to it; stdout is left for the report and JSON output.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = __name__.split('.')[0]

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def _level_for(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Args:
        verbose: DEBUG level, shows notes about sparse markup
        quiet: WARNING level; verbose wins if both are set
        stream: Output stream, stderr by default

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_level_for(verbose, quiet))

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Replaces any handler from an earlier call
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
