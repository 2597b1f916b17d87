"""Centralized logger configuration for bufscan.

Log records go to stderr so they never mix with the report on stdout.
The default level is WARNING; ``BUFSCAN_LOG`` (DEBUG/INFO/WARNING/ERROR)
overrides it, and the CLI raises it with ``-v``.
"""

from __future__ import annotations

import logging
import os

_BASE_NAME = "bufscan"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_level() -> int:
    name = os.getenv("BUFSCAN_LOG", "").upper()
    if name in _VALID_LEVELS:
        return getattr(logging, name)
    return logging.WARNING


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``bufscan.<name>``, configuring the base logger on first use."""

    base = logging.getLogger(_BASE_NAME)
    if not base.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, datefmt=_DATEFMT))
        base.addHandler(handler)
        base.setLevel(_env_level())
        base.propagate = False

    if not name:
        return base
    return logging.getLogger(f"{_BASE_NAME}.{name}")


def set_verbosity(verbosity: int) -> None:
    """Map ``-v`` counts onto the base logger: 1 -> INFO, 2+ -> DEBUG."""

    if verbosity <= 0:
        return
    level = logging.INFO if verbosity == 1 else logging.DEBUG
    get_logger().setLevel(level)
