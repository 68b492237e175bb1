"""
MarketObservation — котировка инструмента от одного источника

Immutable Pydantic модель. Read-only факт, поступающий извне
(например, EUR/USD spot от Bloomberg, Reuters, ExchangeAPI).
"""

from typing import Any

from pydantic import BaseModel, Field


class MarketObservation(BaseModel):
    """
    Котировка: источник, инструмент, цена.

    Положительность цены не проверяется численно: консистентность
    проверяет ConsistencyGate.
    """

    source: str = Field(..., min_length=1, description="Идентификатор источника данных")
    instrument: str = Field(..., min_length=1, description="Идентификатор инструмента (например EUR/USD)")
    price: float = Field(..., allow_inf_nan=False, description="Котировка")

    model_config = {"frozen": True}

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "MarketObservation":
        """
        Создание из JSON payload с предварительной проверкой контракта.

        Raises:
            jsonschema.ValidationError: payload не соответствует market_observation.json
        """
        from src.core.contracts.validators import validate_market_observation

        validate_market_observation(data)
        return cls(**data)
