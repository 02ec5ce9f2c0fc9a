"""Central logging configuration for the library."""

from __future__ import annotations

import logging
from typing import Optional

_DEFAULT_LEVEL = logging.INFO
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format=_FORMAT)
    return logger


def set_verbose(verbose: bool) -> None:
    """Switch the ``docxwriter`` logger between DEBUG and the default level."""
    logging.getLogger("docxwriter").setLevel(logging.DEBUG if verbose else _DEFAULT_LEVEL)
