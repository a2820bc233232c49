"""Logging setup shared by the API server and the command line."""

import logging

from campus_scheduler.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG".
    """
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # SQL echo is controlled separately; keep the engine quiet at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
