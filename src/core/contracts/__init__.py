"""
Contract Validation Module

Валидация входных JSON payload'ов (portfolio, market_observation).
"""

from .validators import (
    ContractValidator,
    MarketObservationValidator,
    PortfolioValidator,
    SchemaLoader,
    validate_market_observation,
    validate_portfolio,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PortfolioValidator",
    "MarketObservationValidator",
    # Functions
    "validate_portfolio",
    "validate_market_observation",
]
