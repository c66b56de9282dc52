"""Logging setup for attrframe.

Library modules log through logging.getLogger(__name__) and never install
handlers themselves. Applications (and the CLI) call configure_logging() to
get one JSON record per line on a stream.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from typing import IO, Optional

LOGGER_NAME = "attrframe"


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Install a structured stream handler on the attrframe logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level for the attrframe logger
        stream: Output stream (default: stderr)

    Returns:
        The attrframe logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        formatter = logging.Formatter(
            fmt=json.dumps(
                {
                    "ts": "%(asctime)s",
                    "level": "%(levelname)s",
                    "name": "%(name)s",
                    "msg": "%(message)s",
                }
            ),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
