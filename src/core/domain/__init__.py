"""
Domain models and value objects.

Contains the objective inputs (Portfolio, MarketObservation, Coefficients)
and its outcomes (ScoreResult, GateFailure).
"""

from src.core.domain.coefficients import Coefficients
from src.core.domain.market_observation import MarketObservation
from src.core.domain.portfolio import Portfolio
from src.core.domain.score_result import (
    EngineState,
    GateFailure,
    ObjectiveOutcome,
    ScoreResult,
)

__all__ = [
    # Inputs
    "Portfolio",
    "MarketObservation",
    "Coefficients",
    # Outcomes
    "EngineState",
    "ScoreResult",
    "GateFailure",
    "ObjectiveOutcome",
]
