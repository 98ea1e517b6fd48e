"""Logging setup for the shell. The library modules only ever call `logging.getLogger(__name__)`."""

import logging
from typing import Optional

LOG_FORMAT = "[%(levelname)s][%(filename)s:%(lineno)s][%(asctime)s] %(message)s"
DATE_FORMAT = "%Y:%m:%d, %H:%M"


def init_logger(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """Console output goes to stderr, so log lines never mix with the printed board."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=level,
        handlers=handlers,
        force=True,
    )
