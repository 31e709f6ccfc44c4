"""Logging helpers.

Modules obtain loggers via ``logging.getLogger(__name__)`` and never attach
handlers. Front ends call :func:`setup_default_logging` once.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "WARNING") -> None:
    """Configure the root logger unless the application already has.

    - No-op if the root logger already has handlers
    - Unknown level names fall back to WARNING
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.WARNING)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=DEFAULT_FORMAT)


__all__ = ["DEFAULT_FORMAT", "setup_default_logging"]
