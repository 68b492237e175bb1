"""Observability — измерение латентности и штраф за медленные вычисления."""

from .latency import (
    DEFAULT_LATENCY_POLICY,
    LATENCY_PENALTY_SCALE,
    LATENCY_THRESHOLD_SEC,
    LatencyPolicy,
    Measurement,
    latency_penalty,
    measure,
)

__all__ = [
    "DEFAULT_LATENCY_POLICY",
    "LATENCY_PENALTY_SCALE",
    "LATENCY_THRESHOLD_SEC",
    "LatencyPolicy",
    "Measurement",
    "latency_penalty",
    "measure",
]
