# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Pair-sum multiset strategy.

Keeps every pairwise sum of the window in a multiset so a block is checked
with a single lookup. Memory scales with O(window_size ** 2).
"""

from __future__ import annotations

import itertools
from collections import Counter

from .blocks import B
from .mine import Mine


class HashMine(Mine[B]):
    """Mine backed by a multiset of window pair sums.

    Blocks must be hashable. Construction enumerates all pairs, O(W^2);
    each accepted block costs O(W) multiset updates.
    """

    engine_name = "hash"

    def _build_index(self, blocks: list) -> None:
        # Holds all the possible two element sums from the window, with multiplicity
        self._block_pair_sums: Counter = Counter(
            first + second for first, second in itertools.combinations(blocks, 2)
        )

    def _contains_pair_sum(self, block: B) -> bool:
        return self._block_pair_sums[block] > 0

    def _update_index(self, old_block: B, new_block: B) -> None:
        sums = self._block_pair_sums
        for block in self._validation_blocks:
            # remove the sums where the evicted block was a summand
            stale = old_block + block
            remaining = sums[stale] - 1
            if remaining:
                sums[stale] = remaining
            else:
                del sums[stale]
            # add the sums where the new block is a summand
            sums[new_block + block] += 1


__all__ = ["HashMine"]
