# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import time

import pytest

from blockmine import HashMine, InvalidBlockError, InvalidInitializationBlocksSizeError, TwoPtrMine
from blockmine.telemetry import metrics as telemetry_metrics


def test_step_counters_are_tagged_by_engine(recorded_metrics, mine_cls):
    mine = mine_cls([4, 4, 2, 2])
    mine.try_extend_one(8)
    with pytest.raises(InvalidBlockError):
        mine.try_extend_one(1)

    engine = mine_cls.engine_name
    assert recorded_metrics["mine_created_total"].total(engine=engine) == 1
    assert recorded_metrics["block_accepted_total"].total(engine=engine) == 1
    assert recorded_metrics["block_rejected_total"].total(engine=engine) == 1


@pytest.mark.parametrize(
    "blocks,status,error",
    [
        ([1, 2, 3, 4, 5], "valid", None),
        ([1, 2, 3, 4, 100], "invalid_block", InvalidBlockError),
        ([1, 2], "invalid_initialization", InvalidInitializationBlocksSizeError),
    ],
)
def test_stream_latency_records_outcome(recorded_metrics, blocks, status, error):
    if error is None:
        TwoPtrMine.try_create_and_extend(blocks, 4)
    else:
        with pytest.raises(error):
            TwoPtrMine.try_create_and_extend(blocks, 4)

    calls = recorded_metrics["stream_latency_ms"].calls
    assert len(calls) == 1
    duration, attributes = calls[0]
    assert duration >= 0
    assert attributes == {"engine": "two_ptr", "status": status}


def test_broken_histogram_does_not_affect_validation(monkeypatch):
    class _Exploding:
        def record(self, *_a, **_kw):
            raise RuntimeError("exporter down")

    monkeypatch.setattr(telemetry_metrics, "stream_latency_ms", _Exploding())

    mine = HashMine.try_create_and_extend([1, 2, 3], 3)
    assert mine.window == (1, 2, 3)

    telemetry_metrics.record_stream_metrics("hash", "valid", time.perf_counter())


@pytest.mark.parametrize(
    "instrument", ["mine_created_total", "block_accepted_total", "block_rejected_total"]
)
def test_broken_step_counter_does_not_affect_validation(monkeypatch, mine_cls, instrument):
    """
    GIVEN: A per-step counter whose exporter raises on every add
    WHEN: A mine is created and fed one valid and one invalid block
    THEN: The valid block is accepted silently and the invalid one still
          raises InvalidBlockError with an unchanged window
    """

    class _Exploding:
        def add(self, *_a, **_kw):
            raise RuntimeError("exporter down")

    monkeypatch.setattr(telemetry_metrics, instrument, _Exploding())

    mine = mine_cls([4, 4, 2, 2])
    mine.try_extend_one(8)
    assert mine.window == (4, 2, 2, 8)
    assert mine.total_blocks == 5

    with pytest.raises(InvalidBlockError) as excinfo:
        mine.try_extend_one(3)
    assert excinfo.value == InvalidBlockError(3, 6)
    assert mine.window == (4, 2, 2, 8)
