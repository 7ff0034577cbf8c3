"""
Logging setup for applications embedding the overlay support code.

The library modules only create loggers; nothing is configured on import.
"""
import logging

from utils.constants import LOG_FORMAT, LOG_DATE_FORMAT


def configure_logging(level: int = logging.INFO, force: bool = False) -> None:
    """
    Configure logging to print to console.

    Args:
        level: Threshold level for logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force: Replace handlers already installed on the root logger
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=force,
    )
