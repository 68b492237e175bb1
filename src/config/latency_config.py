from pydantic import BaseModel, Field

from src.observability.latency import (
    LATENCY_PENALTY_SCALE,
    LATENCY_THRESHOLD_SEC,
    LatencyPolicy,
)


class LatencyConfig(BaseModel):
    """Политика штрафа латентности (по умолчанию 10 ms / ×1000)."""

    threshold_seconds: float = Field(LATENCY_THRESHOLD_SEC, ge=0, allow_inf_nan=False)
    penalty_scale: float = Field(LATENCY_PENALTY_SCALE, ge=0, allow_inf_nan=False)

    def to_policy(self) -> LatencyPolicy:
        return LatencyPolicy(
            threshold_seconds=self.threshold_seconds,
            penalty_scale=self.penalty_scale,
        )
