# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Stream validation demo - finding the first block that breaks the rule.

Shows step-by-step extension, one-shot validation, checkpointing with
clone() before a bulk extension, and switching strategies via the
BLOCKMINE_ENGINE environment variable.

Run with:
    python examples/stream_validation_demo.py
"""

from __future__ import annotations

import os

from blockmine import HashMine, InvalidBlockError, get_mine_class, validate_stream

STREAM = [35, 20, 15, 25, 47, 40, 62, 55, 65, 95, 102, 117, 150, 182, 127, 219, 299, 277, 309, 576]
WINDOW_SIZE = 5


def step_by_step() -> None:
    print("Step by step (window of 4):")
    mine = HashMine([4, 4, 2, 2])
    for block in (8, 4, 2):
        try:
            mine.try_extend_one(block)
        except InvalidBlockError as error:
            print(f"  ✗ {block}: {error.message}")
        else:
            print(f"  ✓ {block} -> window {list(mine.window)}")


def one_shot() -> None:
    for engine in ("hash", "two_ptr"):
        os.environ["BLOCKMINE_ENGINE"] = engine
        mine_cls = get_mine_class()
        try:
            validate_stream(STREAM, WINDOW_SIZE)
        except InvalidBlockError as error:
            print(f"  [{mine_cls.__name__}] block {error.block} at position {error.position} is invalid")


def checkpointed() -> None:
    print("All-or-nothing bulk extension via clone():")
    mine = HashMine(STREAM[:WINDOW_SIZE])
    checkpoint = mine.clone()
    try:
        mine.try_extend(STREAM[WINDOW_SIZE:])
    except InvalidBlockError:
        mine = checkpoint
    print(f"  window after discarding the partial extension: {list(mine.window)}")


def main() -> None:
    step_by_step()
    print("\nOne-shot validation with each engine:")
    one_shot()
    print()
    checkpointed()


if __name__ == "__main__":
    main()
