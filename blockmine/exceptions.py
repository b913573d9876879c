# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exceptions raised by blockmine."""

from __future__ import annotations

from typing import Any, Iterable, Optional


class MineError(Exception):
    """Base class for every error raised by a mine."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInitializationBlocksSizeError(MineError):
    """Fewer blocks were available than the window needs to start."""

    def __init__(self, window_size: int, provided: int):
        self.window_size = window_size
        self.provided = provided
        super().__init__(
            f"Initialization blocks must have at least: {window_size} blocks. "
            f"Size of the blocks provided: {provided}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidInitializationBlocksSizeError):
            return NotImplemented
        return (self.window_size, self.provided) == (other.window_size, other.provided)

    def __hash__(self) -> int:
        return hash((type(self), self.window_size, self.provided))

    def __reduce__(self):
        return (type(self), (self.window_size, self.provided))


class InvalidBlockError(MineError):
    """A block is not the sum of two distinct blocks in the current window.

    ``position`` is the 1-based index of the block within the whole stream,
    initialization blocks included.
    """

    def __init__(self, block: Any, position: int, window_size: Optional[int] = None):
        self.block = block
        self.position = position
        self.window_size = window_size
        reason = f"Validation for block number {position} failed. Invalid block value: {block}."
        if window_size is not None:
            reason += (
                " A block is valid iff it is the sum of any two blocks in the "
                f"previous: {window_size}."
            )
        super().__init__(reason)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidBlockError):
            return NotImplemented
        return (self.block, self.position) == (other.block, other.position)

    def __hash__(self) -> int:
        return hash((type(self), self.position))

    def __reduce__(self):
        return (type(self), (self.block, self.position, self.window_size))

    def __repr__(self) -> str:
        return f"InvalidBlockError({self.block!r}, {self.position!r})"


class ConfigurationError(MineError):
    """Raised when a mine strategy cannot be resolved."""

    def __init__(self, engine: str, known: Iterable[str]):
        self.engine = engine
        self.known = tuple(sorted(known))
        super().__init__(
            f"Unknown mine engine '{engine}'. Expected one of: {', '.join(self.known)}"
        )

    def __reduce__(self):
        return (type(self), (self.engine, self.known))


__all__ = [
    "MineError",
    "InvalidInitializationBlocksSizeError",
    "InvalidBlockError",
    "ConfigurationError",
]
