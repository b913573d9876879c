# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The mine abstraction shared by every validation strategy.

A mine owns a window of the ``window_size`` most recently accepted blocks. A
new block is valid iff it is the sum of two blocks held in distinct slots of
that window. Accepting a block evicts the oldest one; rejecting a block leaves
the mine untouched.

Concrete strategies only decide how to answer "is this a pair sum?" and how to
keep their support index in step with the window. Everything else (bulk
extension, checked construction, one-shot stream validation) is implemented
once here in terms of :meth:`Mine.try_extend_one`.

.. code-block:: python

    from blockmine import HashMine, InvalidBlockError

    mine = HashMine([35, 20, 15, 25, 47])
    try:
        mine.try_extend([40, 62, 55, 65, 95, 102, 117, 150, 182, 127])
    except InvalidBlockError as error:
        print(error.block, error.position)  # 127 15

Bulk extension never rolls back: blocks accepted before the failing one stay
in the window. Take a :meth:`Mine.clone` first when all-or-nothing semantics
are needed.
"""

from __future__ import annotations

import copy
import logging
import time
from abc import ABC, abstractmethod
from collections import deque
from typing import ClassVar, Deque, Generic, Iterable, Tuple, Type, TypeVar

from .blocks import B, take_with_remainder
from .exceptions import InvalidBlockError, InvalidInitializationBlocksSizeError
from .telemetry import metrics as _metrics
from .telemetry.runtime import get_tracer

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="Mine")


def _check_window_size(window_size: int) -> None:
    if window_size < 1:
        raise ValueError(f"Window size must be at least 1, got {window_size}")


class Mine(ABC, Generic[B]):
    """Sliding-window pair-sum validator.

    Subclasses provide the support index through three hooks:
    ``_build_index``, ``_contains_pair_sum`` and ``_update_index``.
    """

    #: Registry name of the strategy, also used as the telemetry attribute.
    engine_name: ClassVar[str] = "abstract"

    def __init__(self, initialization_blocks: Iterable[B]):
        """Create a mine whose window is exactly *initialization_blocks*.

        No validation is performed on the initialization blocks. The window
        size is the number of blocks given.
        """

        blocks = list(initialization_blocks)
        _check_window_size(len(blocks))

        self._window_size = len(blocks)
        self._validation_blocks: Deque[B] = deque(blocks)
        self._total_blocks = len(blocks)
        self._build_index(blocks)

        _metrics.record_step(_metrics.mine_created_total, self.engine_name)
        logger.debug("Initialized %s with window size %d", type(self).__name__, self._window_size)

    # ------------------------------------------------------------------
    # Strategy hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _build_index(self, blocks: list) -> None:
        """Build the support index for the initial window."""

    @abstractmethod
    def _contains_pair_sum(self, block: B) -> bool:
        """Return True if two distinct window slots sum to *block*."""

    @abstractmethod
    def _update_index(self, old_block: B, new_block: B) -> None:
        """Swap *old_block* for *new_block* in the support index.

        Called after *old_block* has left the window and before *new_block*
        joins it, so the window holds the ``window_size - 1`` blocks that
        survive the step.
        """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def window(self) -> Tuple[B, ...]:
        """Snapshot of the window, oldest block first."""

        return tuple(self._validation_blocks)

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def total_blocks(self) -> int:
        """Number of blocks accepted so far, initialization blocks included."""

        return self._total_blocks

    def try_extend_one(self, new_block: B) -> None:
        """Try to extend the mine by a single block.

        Raises:
            InvalidBlockError: *new_block* is not the sum of two distinct
                window blocks. The mine is left unchanged.
        """

        if not self._contains_pair_sum(new_block):
            position = self._total_blocks + 1
            _metrics.record_step(_metrics.block_rejected_total, self.engine_name)
            logger.debug("Rejected block %r at position %d", new_block, position)
            raise InvalidBlockError(new_block, position, self._window_size)

        old_block = self._validation_blocks.popleft()
        self._update_index(old_block, new_block)
        self._validation_blocks.append(new_block)
        self._total_blocks += 1

        _metrics.record_step(_metrics.block_accepted_total, self.engine_name)

    def try_extend(self, blocks: Iterable[B]) -> None:
        """Try to extend the mine with every block of *blocks*, in order.

        Succeeds if every block is accepted or *blocks* is empty. Otherwise the
        :class:`InvalidBlockError` of the first invalid block is raised.
        **Blocks prior to the invalid block are still added to the mine.**
        """

        for block in blocks:
            self.try_extend_one(block)

    @classmethod
    def try_new(cls: Type[M], blocks: Iterable[B], window_size: int) -> M:
        """Create a mine from the first *window_size* items of *blocks*.

        Raises:
            InvalidInitializationBlocksSizeError: fewer than *window_size*
                blocks were available.
        """

        _check_window_size(window_size)
        initialization_blocks, _ = take_with_remainder(blocks, window_size)
        if len(initialization_blocks) < window_size:
            raise InvalidInitializationBlocksSizeError(window_size, len(initialization_blocks))
        return cls(initialization_blocks)

    @classmethod
    def try_create_and_extend(cls: Type[M], blocks: Iterable[B], window_size: int) -> M:
        """Create a mine and extend it from a single stream.

        The first *window_size* blocks initialize the mine; the remainder is
        passed to :meth:`try_extend`. The mine is returned when the whole
        stream is valid.

        Raises:
            InvalidInitializationBlocksSizeError: the stream is shorter than
                *window_size*.
            InvalidBlockError: a block after the initialization blocks failed
                validation.
        """

        _check_window_size(window_size)
        started_at = time.perf_counter()

        with get_tracer().start_as_current_span(
            "blockmine.validate_stream",
            attributes={"blockmine.engine": cls.engine_name, "blockmine.window_size": window_size},
        ) as span:
            initialization_blocks, remaining_blocks = take_with_remainder(blocks, window_size)
            if len(initialization_blocks) < window_size:
                _metrics.record_stream_metrics(cls.engine_name, "invalid_initialization", started_at)
                raise InvalidInitializationBlocksSizeError(window_size, len(initialization_blocks))

            mine = cls(initialization_blocks)
            try:
                mine.try_extend(remaining_blocks)
            except InvalidBlockError as error:
                span.set_attribute("blockmine.invalid_position", error.position)
                _metrics.record_stream_metrics(cls.engine_name, "invalid_block", started_at)
                raise

            span.set_attribute("blockmine.total_blocks", mine.total_blocks)
            _metrics.record_stream_metrics(cls.engine_name, "valid", started_at)
            return mine

    def clone(self: M) -> M:
        """Return an independent copy sharing no mutable state with this mine."""

        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(window_size={self._window_size}, "
            f"total_blocks={self._total_blocks}, window={list(self._validation_blocks)!r})"
        )


__all__ = ["Mine"]
