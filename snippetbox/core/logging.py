"""Logging setup for the web process."""

import logging
import sys

from snippetbox.core.config import settings

LOG_FORMAT = "time=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    """Send text logs to stdout at the configured level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stdout)
