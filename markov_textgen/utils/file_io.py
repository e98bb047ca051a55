# markov_textgen/utils/file_io.py - file-system glue for the model pipeline
#
# read_* / write_bytes: failures here are fatal, the caller has nothing to work with.
# write_text: failures are raised as OSError so the caller can decide.

from __future__ import annotations

import logging
import os
from typing import NoReturn

logger = logging.getLogger(__name__)


def fatal(message: str) -> NoReturn:
    """Log a critical diagnostic and terminate the process with status 1."""
    logger.critical(message)
    raise SystemExit(1)


def _ensure_parent(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)


def read_text(path: str, encoding: str = "utf-8") -> str:
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        fatal(f"Failed to read source text `{path}`: {e}")


def read_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        fatal(f"Failed to read model file `{path}`: {e}")


def write_bytes(path: str, data: bytes) -> None:
    try:
        _ensure_parent(path)
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        fatal(f"Failed to write model file `{path}`: {e}")


def write_text(path: str, text: str, encoding: str = "utf-8") -> None:
    """Overwrite `path` with `text`. Raises OSError on failure."""
    _ensure_parent(path)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)
