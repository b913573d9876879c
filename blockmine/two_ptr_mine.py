# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Two-pointer strategy over a sorted copy of the window."""

from __future__ import annotations

from bisect import bisect_left, insort

from .blocks import B
from .mine import Mine


class TwoPtrMine(Mine[B]):
    """Mine backed by a sorted copy of the window.

    Blocks must be orderable. Memory stays O(W); a check is an O(W) scan and
    an accepted block costs a binary search plus an O(W) shift.
    """

    engine_name = "two_ptr"

    def _build_index(self, blocks: list) -> None:
        self._sorted_blocks: list = sorted(blocks)

    def _contains_pair_sum(self, block: B) -> bool:
        ordered = self._sorted_blocks
        low, high = 0, len(ordered) - 1

        # low == high would pair a slot with itself
        while low < high:
            pair_sum = ordered[low] + ordered[high]
            if pair_sum == block:
                return True
            if pair_sum < block:
                low += 1
            else:
                high -= 1

        return False

    def _update_index(self, old_block: B, new_block: B) -> None:
        ordered = self._sorted_blocks
        del ordered[bisect_left(ordered, old_block)]
        insort(ordered, new_block)


__all__ = ["TwoPtrMine"]
