"""Logging utilities.

Library modules log through ``logging.getLogger("phashkit.<module>")`` and never
configure handlers themselves; :func:`setup_logging` is called by the CLI (or by
applications that want the same format).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

__all__ = ["LOG_FORMAT", "setup_logging"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"

_HANDLER_MARKER = "_phashkit_handler"


def setup_logging(level: str | int = logging.WARNING, log_file: Optional[str | Path] = None) -> logging.Logger:
    """Configure the ``phashkit`` logger hierarchy.

    Args:
        level: Log level name or number.
        log_file: Optional file that receives the same records as the console.

    Calling it again replaces the handlers installed by a previous call.
    """

    logger = logging.getLogger("phashkit")
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    setattr(ch, _HANDLER_MARKER, True)
    logger.addHandler(ch)

    # File
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(fmt)
        setattr(fh, _HANDLER_MARKER, True)
        logger.addHandler(fh)

    return logger
