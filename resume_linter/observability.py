"""Logging setup and timing helpers for the CLI and web surfaces."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from time import perf_counter
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False, level: Optional[str] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    ``verbose`` selects INFO; otherwise *level* (a level name such as
    ``"DEBUG"``) or WARNING. Calling this again only updates the level.
    """
    root = logging.getLogger("resume_linter")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(handler)

    if verbose:
        root.setLevel(logging.INFO)
    else:
        root.setLevel(logging.getLevelName((level or "WARNING").upper()))
    return root


@contextmanager
def log_duration(operation: str) -> Iterator[None]:
    """Log how long the wrapped block took, in milliseconds."""
    start = perf_counter()
    try:
        yield
    finally:
        logger.debug("%s took %.2fms", operation, (perf_counter() - start) * 1000)
