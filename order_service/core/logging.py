"""
Logging setup for the order service.

Every module logs through the standard library with one shared format on
stdout, so container log collectors pick it up unchanged.
"""

import logging
import sys

from order_service.core.config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str | None = None):
    """
    Configures the root logger once for the whole process.

    Args:
        level (str | None): Log level name; defaults to ``settings.LOG_LEVEL``.
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Kafka client is chatty at INFO
    logging.getLogger("kafka").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
