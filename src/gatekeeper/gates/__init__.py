"""Gates — индивидуальные гейты Gatekeeper.

- Consistency Gate: кросс-валидация котировок между источниками
"""

from .consistency_gate import (
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
