"""Pytest fixtures shared by the blockmine test-suite.

The OpenTelemetry API is a no-op without an SDK, so tests that care about
telemetry swap the instruments for in-memory recorders via ``monkeypatch``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from blockmine import HashMine, TwoPtrMine
from blockmine.registry import ENGINE_ENV_VAR
from blockmine.telemetry import metrics as telemetry_metrics


class RecordingInstrument:
    """Collects every ``add``/``record`` call made on an instrument."""

    def __init__(self) -> None:
        self.calls: List[Tuple[float, Dict[str, Any]]] = []

    def add(self, amount: float, attributes: Optional[Dict[str, Any]] = None) -> None:
        self.calls.append((amount, dict(attributes or {})))

    def record(self, amount: float, attributes: Optional[Dict[str, Any]] = None) -> None:
        self.calls.append((amount, dict(attributes or {})))

    def total(self, **attributes: Any) -> float:
        return sum(
            amount
            for amount, attrs in self.calls
            if all(attrs.get(key) == value for key, value in attributes.items())
        )


@pytest.fixture(params=[HashMine, TwoPtrMine], ids=["hash", "two_ptr"])
def mine_cls(request):
    """Run the test once per mine strategy."""
    return request.param


@pytest.fixture()
def recorded_metrics(monkeypatch) -> Dict[str, RecordingInstrument]:
    """Replace the telemetry instruments with recorders."""

    recorders = {
        name: RecordingInstrument()
        for name in (
            "mine_created_total",
            "block_accepted_total",
            "block_rejected_total",
            "stream_latency_ms",
        )
    }
    for name, recorder in recorders.items():
        monkeypatch.setattr(telemetry_metrics, name, recorder)
    return recorders


@pytest.fixture(autouse=True)
def _clean_engine_env(monkeypatch):
    """Tests start without a configured default engine."""
    monkeypatch.delenv(ENGINE_ENV_VAR, raising=False)
    yield


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield
