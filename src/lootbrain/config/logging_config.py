"""Log output setup for lootbrain.

The package only emits records through module loggers under the `lootbrain`
namespace. Applications that already configure logging need nothing from here;
scripts and demos can call:

    from lootbrain.config import configure_logging
    configure_logging(logging.DEBUG)

Scan timings and rejections go to DEBUG, claimed targets to INFO and packing
failures to ERROR.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "lootbrain"
LOG_FORMAT = "%(asctime)s %(threadName)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Send lootbrain records to `stream` (stdout by default).

    The handler is attached to the package logger, not the root logger, and
    only once; later calls just adjust the level.

    Args:
        level: Level for the `lootbrain` logger.
        stream: Output stream for the handler.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger
