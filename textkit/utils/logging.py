# textkit/utils/logging.py

import logging
import sys
from typing import Optional, TextIO

from textkit.core.config import settings
from textkit.messages.cli_messages import INVALID_LOG_LEVEL, LOGGING_INITIALIZED
from textkit.utils.exceptions import InvalidConfigError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None):
    name = str(level or settings.LOG_LEVEL).upper()
    if name not in LOG_LEVELS:
        raise InvalidConfigError(
            code="INVALID_LOG_LEVEL",
            message=INVALID_LOG_LEVEL.format(
                value=level or settings.LOG_LEVEL, available=", ".join(LOG_LEVELS)
            ),
        )

    logger = logging.getLogger()
    logger.setLevel(name)
    logger.handlers = []

    formatter = logging.Formatter(settings.LOG_FORMAT)

    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.info(LOGGING_INITIALIZED)
