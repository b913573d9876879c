# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for blockmine."""

from __future__ import annotations

import logging
import time

from .runtime import meter

logger = logging.getLogger(__name__)

mine_created_total = meter.create_counter(
    name="blockmine.mine.created.total",
    description="Counts the number of mines initialized, partitioned by engine.",
    unit="1",
)

block_accepted_total = meter.create_counter(
    name="blockmine.block.accepted.total",
    description="Counts blocks that passed pair-sum validation and advanced the window.",
    unit="1",
)

block_rejected_total = meter.create_counter(
    name="blockmine.block.rejected.total",
    description="Counts blocks that failed pair-sum validation.",
    unit="1",
)

stream_latency_ms = meter.create_histogram(
    name="blockmine.stream.latency.ms",
    description="Time taken to initialize a mine and validate the remainder of a stream.",
    unit="ms",
)


def record_step(instrument, engine: str) -> None:
    """Add one to a per-step counter, tagged with the engine name."""

    try:
        instrument.add(1, {"engine": engine})
    except Exception:
        # Telemetry must never interfere with validation results
        logger.debug("Failed to record step metric for %s", engine, exc_info=True)


def record_stream_metrics(engine: str, status: str, started_at: float) -> None:
    """Record the latency of a one-shot stream validation.

    Args:
        engine: Registry name of the mine strategy
        status: Outcome ("valid", "invalid_block", "invalid_initialization")
        started_at: Timestamp from time.perf_counter() when validation started
    """

    duration_ms = (time.perf_counter() - started_at) * 1000.0
    try:
        stream_latency_ms.record(duration_ms, {"engine": engine, "status": status})
    except Exception:
        # Telemetry must never interfere with validation results
        logger.debug("Failed to record stream latency for %s", engine, exc_info=True)


__all__ = [
    "mine_created_total",
    "block_accepted_total",
    "block_rejected_total",
    "stream_latency_ms",
    "record_step",
    "record_stream_metrics",
]
