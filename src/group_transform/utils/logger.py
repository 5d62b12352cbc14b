"""Global logging setup"""
import logging
import sys

from group_transform.constants import LOG_FORMAT


def configure_logging(verbose: bool = False):
    """Configure root logging for applications embedding the engine

    Args:
        verbose: DEBUG level (every cascade step) instead of WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
