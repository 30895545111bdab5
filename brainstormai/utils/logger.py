import logging
import sys
from typing import Optional

from brainstormai.utils.config import config

PACKAGE_LOGGER_NAME = "brainstormai"


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> logging.Logger:
    """
    Send BrainstormAI logs to stdout at the given level, default from LOG_LEVEL.

    Other libraries (google-genai, googleapiclient, pymongo, uvicorn) only
    reach the root logger, which stays at ERROR. Calling this again swaps the
    package handler rather than adding a second one.
    """
    level = level or config.log_level
    log_format = log_format or config.log_format
    logging.basicConfig(level=logging.ERROR, format=log_format, stream=sys.stdout)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(log_format))
    package_logger.addHandler(stdout_handler)
    # Records stop here so the root handler does not print them twice
    package_logger.propagate = False
    return package_logger


configure_logging()

logger = logging.getLogger(__name__)
