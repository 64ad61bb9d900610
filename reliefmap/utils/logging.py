"""
Centralized logging for the reliefmap package.

Usage:
    from reliefmap.utils.logging import get_logger
    logger = get_logger(__name__)

Environment variables:
    RELIEFMAP_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
"""

from __future__ import annotations

import logging
import os
from typing import Optional


ROOT_LOGGER_NAME = "reliefmap"
LOG_LEVEL_ENV = "RELIEFMAP_LOG_LEVEL"

_LEVEL_NAMES = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _resolve_level(env_value: Optional[str]) -> int:
    if not env_value:
        return logging.INFO
    return _LEVEL_NAMES.get(env_value.strip().upper(), logging.INFO)


def _configure_root_once() -> None:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers:
        return
    level = _resolve_level(os.getenv(LOG_LEVEL_ENV))
    root.setLevel(level)
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt="%(levelname)s | %(name)s | %(message)s"))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child logger under the package root logger.

    Module names already under ``reliefmap.`` are re-rooted so that
    ``get_logger(__name__)`` does not nest the package name twice.
    """
    _configure_root_once()
    pkg_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not name or name == ROOT_LOGGER_NAME:
        return pkg_logger
    prefix = ROOT_LOGGER_NAME + "."
    if name.startswith(prefix):
        name = name[len(prefix):]
    return pkg_logger.getChild(name)
