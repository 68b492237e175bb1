"""Gatekeeper — гейты допуска рыночных данных к расчёту objective."""

from .gates.consistency_gate import (
    ConsistencyGate,
    ConsistencyGateConfig,
    ConsistencyGateResult,
    check_consistency,
)

__all__ = [
    "ConsistencyGate",
    "ConsistencyGateConfig",
    "ConsistencyGateResult",
    "check_consistency",
]
