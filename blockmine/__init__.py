# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""blockmine - sliding-window pair-sum validation for numeric streams."""

from .blocks import Block, SortableBlock, take_with_remainder
from .exceptions import (
    ConfigurationError,
    InvalidBlockError,
    InvalidInitializationBlocksSizeError,
    MineError,
)
from .mine import Mine
from .hash_mine import HashMine
from .two_ptr_mine import TwoPtrMine
from .registry import (
    DEFAULT_ENGINE,
    ENGINE_ENV_VAR,
    MINE_CLASSES,
    create_mine,
    get_mine_class,
    validate_stream,
)

__all__ = [
    "Block",
    "SortableBlock",
    "take_with_remainder",
    "MineError",
    "InvalidBlockError",
    "InvalidInitializationBlocksSizeError",
    "ConfigurationError",
    "Mine",
    "HashMine",
    "TwoPtrMine",
    "DEFAULT_ENGINE",
    "ENGINE_ENV_VAR",
    "MINE_CLASSES",
    "create_mine",
    "get_mine_class",
    "validate_stream",
]
