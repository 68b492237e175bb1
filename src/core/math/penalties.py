"""
Penalty Model — линейные штрафы objective

    transaction_penalty = Σ |w_i| × c_i
    exposure_penalty    = Σ |e_i|

Оба штрафа инвариантны к знаку отдельной компоненты и аддитивны по активам.
"""

from src.core.math.linear_algebra import Vector, check_same_length


def transaction_penalty(weights: Vector, costs: Vector) -> float:
    """
    Штраф транзакционных издержек: Σ |w_i| × c_i.

    Args:
        weights: Веса активов
        costs: Издержки на единицу веса (тот же порядок, что weights)

    Raises:
        DimensionMismatch: если длины различаются
    """
    check_same_length("weights", weights, "costs", costs)

    total = 0.0
    for w, c in zip(weights, costs):
        total += abs(w) * c
    return total


def exposure_penalty(exposures: Vector) -> float:
    """Штраф экспозиции: Σ |e_i|."""
    total = 0.0
    for e in exposures:
        total += abs(e)
    return total
