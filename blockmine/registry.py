# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Lookup of mine strategies by name.

The default strategy comes from the ``BLOCKMINE_ENGINE`` environment variable
(``hash`` when unset), read on every call so tests and long-running hosts can
switch strategies without re-importing the package.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, Optional, Type

from .blocks import B
from .exceptions import ConfigurationError
from .hash_mine import HashMine
from .mine import Mine
from .two_ptr_mine import TwoPtrMine

logger = logging.getLogger(__name__)

ENGINE_ENV_VAR = "BLOCKMINE_ENGINE"
DEFAULT_ENGINE = HashMine.engine_name

MINE_CLASSES: Dict[str, Type[Mine]] = {
    HashMine.engine_name: HashMine,
    TwoPtrMine.engine_name: TwoPtrMine,
}


def get_mine_class(engine: Optional[str] = None) -> Type[Mine]:
    """Resolve *engine* (or the configured default) to a mine class."""

    if engine is None:
        engine = os.getenv(ENGINE_ENV_VAR, "")
        if not engine.strip():
            logger.debug("%s not set; using '%s' engine", ENGINE_ENV_VAR, DEFAULT_ENGINE)
            engine = DEFAULT_ENGINE

    name = engine.strip().lower()
    try:
        return MINE_CLASSES[name]
    except KeyError:
        logger.error("Unknown mine engine '%s'", engine)
        raise ConfigurationError(engine, MINE_CLASSES.keys()) from None


def create_mine(blocks: Iterable[B], window_size: int, *, engine: Optional[str] = None) -> Mine:
    """Checked construction with the resolved strategy (see :meth:`Mine.try_new`)."""

    return get_mine_class(engine).try_new(blocks, window_size)


def validate_stream(blocks: Iterable[B], window_size: int, *, engine: Optional[str] = None) -> Mine:
    """One-shot validation with the resolved strategy.

    See :meth:`Mine.try_create_and_extend`.
    """

    return get_mine_class(engine).try_create_and_extend(blocks, window_size)


__all__ = [
    "DEFAULT_ENGINE",
    "ENGINE_ENV_VAR",
    "MINE_CLASSES",
    "create_mine",
    "get_mine_class",
    "validate_stream",
]
