# -*- coding: utf-8 -*-
"""
common/logging.py - Log Output for Demos and Notebooks

Library modules only create `logging.getLogger(__name__)` loggers, all under
the `hypermesh` namespace, and never attach handlers. A script that wants to
see factorization fallbacks or cross-section statistics calls
`setup_default_logging` once.
"""
import logging
from typing import Union

PACKAGE_LOGGER = "hypermesh"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    # Unknown names come back as the string "Level <name>"
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_default_logging(level: Union[int, str] = "INFO") -> logging.Logger:
    """
    Show `hypermesh.*` records at `level` and above.

    A stderr handler goes on the root logger only when nothing has configured
    logging yet; an application's own handlers are left alone. The package
    logger level is set in both cases, and the package logger is returned.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(_resolve_level(level))
    return package


__all__ = ['setup_default_logging', 'PACKAGE_LOGGER']
