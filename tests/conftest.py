import pytest
from loguru import logger

from src.core.domain.market_observation import MarketObservation
from src.core.domain.portfolio import Portfolio


@pytest.fixture(autouse=True)
def disable_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def reference_portfolio() -> Portfolio:
    """Портфель из трёх активов (EUR/USD пример)."""
    return Portfolio(
        weights=[0.4, 0.3, 0.3],
        cov_matrix=[
            [0.04, 0.01, 0.02],
            [0.01, 0.03, 0.015],
            [0.02, 0.015, 0.05],
        ],
        transaction_costs=[0.001, 0.002, 0.0015],
        exposures=[0.1, -0.05, 0.08],
    )


@pytest.fixture
def eurusd_observations() -> list[MarketObservation]:
    """Котировки EUR/USD от трёх источников (консистентные)."""
    return [
        MarketObservation(source="Bloomberg", instrument="EUR/USD", price=1.1025),
        MarketObservation(source="Reuters", instrument="EUR/USD", price=1.1026),
        MarketObservation(source="ExchangeAPI", instrument="EUR/USD", price=1.1024),
    ]
