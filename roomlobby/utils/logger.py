"""Logging for the room lobby, configured from ROOMLOBBY_LOG_* settings."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from roomlobby.utils import config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# urllib3 logs every connection at DEBUG; only let it through when we debug too
_NOISY_LOGGERS = ("urllib3",)


def setup_logger(
    name: str = "roomlobby",
    level: Union[int, str, None] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure the lobby logger once and return it.

    `level` defaults to ROOMLOBBY_LOG_LEVEL and `log_file` to
    ROOMLOBBY_LOG_FILE. Calling again returns the already configured logger,
    so Streamlit reruns do not stack handlers.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    resolved = level if level is not None else config.log_level()
    if isinstance(resolved, str) and not isinstance(logging.getLevelName(resolved.upper()), int):
        resolved = logging.INFO
    elif isinstance(resolved, str):
        resolved = resolved.upper()
    log.setLevel(resolved)

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    log.addHandler(stream)

    path = log_file if log_file is not None else config.log_file()
    if path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    quiet = logging.DEBUG if log.level <= logging.DEBUG else logging.WARNING
    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(quiet)

    return log


def get_logger(name: str = "roomlobby") -> logging.Logger:
    """Return the lobby logger, or a child of it when `name` is dotted below it."""
    return logging.getLogger(name)
