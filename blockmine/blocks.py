# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Block capability contracts shared by every mine strategy.

A block is any value that can be compared for equality and added to another
block of the same type. Plain ``int`` satisfies every contract here, which is
what most callers use.
"""

from __future__ import annotations

import itertools
from typing import Any, Iterable, Iterator, List, Protocol, Tuple, TypeVar


class Block(Protocol):
    """Equality plus addition closed over the block type."""

    def __eq__(self, other: Any) -> bool: ...

    def __add__(self, other: Any) -> Any: ...


class SortableBlock(Block, Protocol):
    """A block with a total order consistent with addition."""

    def __lt__(self, other: Any) -> bool: ...


B = TypeVar("B", bound=Block)
T = TypeVar("T")


def take_with_remainder(items: Iterable[T], n: int) -> Tuple[List[T], Iterator[T]]:
    """Take up to *n* items from *items* and return them with the rest.

    The remainder is the same iterator the items were drawn from, so nothing
    past the first *n* is consumed. Fewer than *n* items are returned when the
    input runs out early.
    """

    iterator = iter(items)
    taken = list(itertools.islice(iterator, n))
    return taken, iterator


__all__ = ["Block", "SortableBlock", "B", "take_with_remainder"]
