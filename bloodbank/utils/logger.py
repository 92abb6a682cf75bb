"""Logging setup for the blood bank CLI."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "bloodbank"


def setup_logger(
    name: str = LOGGER_NAME,
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Configure and return a logger.

    Any handlers from an earlier call are replaced, so calling this again
    (for instance once per CLI invocation) never duplicates output.

    Args:
        name: Logger name
        level: Logging level, as a number or a name such as ``"DEBUG"``
        log_file: Optional path to a log file. If None, logs go to stderr only.

    Returns:
        Configured logger
    """
    log = logging.getLogger(name)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    log.setLevel(level)
    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log
