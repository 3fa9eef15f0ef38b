"""Process wide logging setup for the command line entry point.

Levels resolve in precedence order: CLI flag, ``ADDON_STARTER_LOG_LEVEL``,
then ``WARNING``.
"""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["LOG_LEVEL_ENV", "resolve_level", "setup_logging"]


LOG_LEVEL_ENV = "ADDON_STARTER_LOG_LEVEL"

_FMT_MINIMAL = "%(message)s"
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT = "%H:%M:%S"


def resolve_level(flag: str | None = None, verbosity: int = 0) -> int:
    """Return the numeric log level for the given CLI options."""

    if flag:
        return _parse_level(flag)
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return _parse_level(os.environ.get(LOG_LEVEL_ENV, "WARNING"))


def setup_logging(level: int = logging.WARNING) -> None:
    """Install a single stderr handler on the root logger."""

    if level <= logging.DEBUG:
        fmt = _FMT_DEBUG
    elif level <= logging.INFO:
        fmt = _FMT_VERBOSE
    else:
        fmt = _FMT_MINIMAL

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level
