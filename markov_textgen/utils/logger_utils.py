# logger_utils.py - logging setup and timing helpers

import logging
import os
import time
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "markov_textgen"
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# marks handlers installed here so a second call can swap them out
_OWNED_ATTR = "_markov_textgen_owned"


def configure_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Attach a RichHandler (and optionally a plain file handler) to the package logger.
    Safe to call repeatedly; handlers from a previous call are replaced.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    log.setLevel(level)

    for h in list(log.handlers):
        if getattr(h, _OWNED_ATTR, False):
            log.removeHandler(h)
            h.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    setattr(rich_handler, _OWNED_ATTR, True)
    log.addHandler(rich_handler)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        setattr(fh, _OWNED_ATTR, True)
        log.addHandler(fh)

    return log


def time_block(label: str, logger: Optional[logging.Logger] = None) -> "_Timer":
    """
    Measure how long a block takes and log it at INFO.
        with time_block("build"):
            model.build()
    """
    return _Timer(label, logger or logging.getLogger(PACKAGE_LOGGER))


class _Timer:
    """Context manager used by time_block."""
    def __init__(self, label: str, logger: logging.Logger):
        self.label = label
        self.logger = logger
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        self.logger.info("%s done: %ss", self.label, self.elapsed)
        return False
