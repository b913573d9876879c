# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Telemetry package - OpenTelemetry meter, tracer and instruments."""

from .runtime import get_tracer, meter
from .metrics import (
    block_accepted_total,
    block_rejected_total,
    mine_created_total,
    record_step,
    record_stream_metrics,
    stream_latency_ms,
)

__all__ = [
    "get_tracer",
    "meter",
    "block_accepted_total",
    "block_rejected_total",
    "mine_created_total",
    "record_step",
    "record_stream_metrics",
    "stream_latency_ms",
]
