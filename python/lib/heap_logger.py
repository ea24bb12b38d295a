#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
heap_logger.py
--------------

Tiny logging helper. Every module does::

    logger = init_logger(__name__)

and gets a child of the ``adaptable_heap`` logger.  The first call sets
that logger's level from the ``ADAPTABLE_HEAP_LOG_LEVEL`` environment
variable (``WARNING`` by default) and gives it a ``NullHandler``.
Records still propagate, so where they end up is left to the application
(``logging.basicConfig`` and friends).
"""

from __future__ import annotations

import logging
import os

ROOT_LOGGER_NAME = "adaptable_heap"
LOG_LEVEL_ENV = "ADAPTABLE_HEAP_LOG_LEVEL"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)
_configured = False


def _setup_root_logger() -> None:
    global _configured
    if _configured:
        return

    level = getattr(logging, os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    _root_logger.setLevel(level)

    # Silences "no handler" warnings without taking output away from the host.
    _root_logger.addHandler(logging.NullHandler())
    _configured = True


def init_logger(name: str) -> logging.Logger:
    """Return a logger named ``adaptable_heap.<name>``."""
    _setup_root_logger()
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
