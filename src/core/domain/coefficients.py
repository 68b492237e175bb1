"""
Coefficients — коэффициенты objective

    objective = VaR(z) + λ1·cost + λ2·exposure + λ3·latency

Передаются на каждый вызов, значений по умолчанию нет.
"""

from pydantic import BaseModel, Field


class Coefficients(BaseModel):
    """Множитель доверия z и веса штрафов λ1/λ2/λ3."""

    z: float = Field(..., allow_inf_nan=False, description="Множитель доверия (квантиль), например 1.65")
    lambda1: float = Field(..., ge=0, allow_inf_nan=False, description="Вес штрафа транзакционных издержек")
    lambda2: float = Field(..., ge=0, allow_inf_nan=False, description="Вес штрафа экспозиции")
    lambda3: float = Field(..., ge=0, allow_inf_nan=False, description="Вес штрафа латентности")

    model_config = {"frozen": True}
