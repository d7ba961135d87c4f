from __future__ import annotations

import logging
from typing import Optional

from .config import LoggingSettings, get_settings

_ROOT = "relgraph"
_handler: Optional[logging.Handler] = None


def getLogger(name: str) -> logging.Logger:
    """Return a logger in the relgraph hierarchy (``name`` is usually ``__name__``)."""
    return logging.getLogger(name)


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``relgraph`` package logger.

    Calling this again replaces the handler installed by the previous call
    instead of stacking a second one. Loggers outside the package are left
    alone.
    """
    global _handler

    if settings is None:
        settings = get_settings().logging

    root = logging.getLogger(_ROOT)
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(settings.format))
    root.addHandler(_handler)
    root.setLevel(settings.level)
    return root
