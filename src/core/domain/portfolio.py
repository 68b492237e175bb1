"""
Portfolio — снапшот портфеля для расчёта objective

Immutable Pydantic модель. Все последовательности упорядочены одинаково:
i-й элемент weights, transaction_costs, exposures и i-я строка/столбец
cov_matrix относятся к одному и тому же активу.

Инвариант размерностей проверяется при создании; нарушение → DimensionMismatch
(без усечения и без дополнения).
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.math.linear_algebra import DimensionMismatch, check_same_length, check_square
from src.core.math.numerical_safeguards import validate_finite_vector


class Portfolio(BaseModel):
    """
    Снапшот портфеля: веса, ковариации, издержки, экспозиции.

    Модель frozen: движок только читает её в течение одного вызова score.
    """

    weights: tuple[float, ...] = Field(
        ..., min_length=1, description="Веса активов (порядок значим)"
    )
    cov_matrix: tuple[tuple[float, ...], ...] = Field(
        ..., description="Ковариационная матрица N×N (симметричная PSD)"
    )
    transaction_costs: tuple[float, ...] = Field(
        ..., description="Издержки на единицу веса (≥ 0)"
    )
    exposures: tuple[float, ...] = Field(
        ..., description="Направленная экспозиция по активам"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _validate_dimensions(self) -> "Portfolio":
        self.check_dimensions()

        validate_finite_vector(self.weights, "weights")
        validate_finite_vector(self.transaction_costs, "transaction_costs")
        validate_finite_vector(self.exposures, "exposures")
        for i, row in enumerate(self.cov_matrix):
            validate_finite_vector(row, f"cov_matrix[{i}]")

        for i, c in enumerate(self.transaction_costs):
            if c < 0:
                raise ValueError(f"transaction_costs[{i}] must be non-negative, got {c}")

        return self

    @property
    def dimension(self) -> int:
        """Число активов N."""
        return len(self.weights)

    def check_dimensions(self) -> None:
        """
        Проверка согласованности размерностей.

        Raises:
            DimensionMismatch: если хотя бы одна размерность != N
        """
        n = self.dimension
        if n == 0:
            raise DimensionMismatch("Portfolio must contain at least one asset")

        check_same_length("weights", self.weights, "transaction_costs", self.transaction_costs)
        check_same_length("weights", self.weights, "exposures", self.exposures)
        check_square("cov_matrix", self.cov_matrix, n)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "Portfolio":
        """
        Создание из JSON payload с предварительной проверкой контракта.

        Raises:
            jsonschema.ValidationError: payload не соответствует portfolio.json
            DimensionMismatch: размерности не согласованы
        """
        from src.core.contracts.validators import validate_portfolio

        validate_portfolio(data)
        return cls(**data)
