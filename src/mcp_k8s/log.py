"""
Logging setup.

The stdio transport owns stdout, so every log record goes to stderr.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stderr handler on the root logger.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO").
    """
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    # urllib3 logs every pooled connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
